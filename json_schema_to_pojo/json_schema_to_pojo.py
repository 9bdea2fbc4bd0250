import json
import logging
from pathlib import Path

import click
from click.core import ParameterSource

from . import __version__
from .cli_utils import reconstruct_command_line
from .config import AnnotationStyle, GenerationConfig
from .errors import GenerationError
from .mapper import SchemaMapper
from .render import JavaRenderer
from .rules import RuleFactory
from .schema import SchemaStore

# Boolean options that override the configuration file when given
FLAG_OPTIONS = [
    "include_getters",
    "include_setters",
    "generate_builders",
    "use_inner_class_builders",
    "include_lombok",
    "include_jsr303_annotations",
    "include_jsr305_annotations",
    "use_optional_for_getters",
    "include_generated_annotation",
]


def _flag(name: str):
    dashed = name.replace("_", "-")
    return click.option(f"--{dashed}/--no-{dashed}", name, default=None, help=f"Override the {name} option")


def _flags(command):
    for name in reversed(FLAG_OPTIONS):
        command = _flag(name)(command)
    return command


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Class name of the root schema (default: file name)")
@click.option("--package", "-p", default="", type=str, help="Java package of the generated classes")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@_flags
@click.option("--ref-fragment-path-delimiters", default=None, type=str, help="Characters separating $ref fragment segments")
@click.option("--annotation-style", default=None, type=click.Choice([s.value for s in AnnotationStyle]))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every generation step")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
@click.version_option(__version__)
def json_schema_to_pojo(name, package, config, ref_fragment_path_delimiters, annotation_style, verbose, path, output, **flags):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GenerationConfig.from_dict(json.load(f))
    else:
        config = GenerationConfig()

    # Command line flags override the config file
    ctx = click.get_current_context()
    for option, value in flags.items():
        if ctx.get_parameter_source(option) is ParameterSource.COMMANDLINE:
            setattr(config, option, value)
    if ref_fragment_path_delimiters:
        config.ref_fragment_path_delimiters = ref_fragment_path_delimiters
    if annotation_style is not None:
        config.annotation_style = AnnotationStyle(annotation_style)

    if name is None:
        name = Path(path).name.split(".")[0]

    factory = RuleFactory(config, schema_store=SchemaStore(Path(path).parent))
    comment = f"// Generated by json_schema_to_pojo v{__version__} : {reconstruct_command_line(json_schema_to_pojo)}" if config.add_generation_comment else ""
    try:
        generation = SchemaMapper(factory).generate(name, package, path)
        written = JavaRenderer(comment).write(generation, output)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Generated {len(written)} classes in {output}")
