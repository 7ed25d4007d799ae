"""Main CLI entry point for tokenizer-cli."""

from __future__ import annotations

import logging
import sys

import click

from ..config import TokenizerConfig
from ..exceptions import ConfigurationError, TokenizerCliError
from ..registry import DEFAULT_MODEL, build_default_registry
from ._utils import print_error, print_model_list, print_result, read_input

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Get the current version."""
    try:
        from tokenizer_cli import __version__

        return __version__
    except ImportError:
        return "unknown"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("text", nargs=-1)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(),
    default=None,
    help="Path to file to analyze",
)
@click.option(
    "--model",
    "-m",
    default=None,
    help=f"Model to use for tokenization (default: {DEFAULT_MODEL})",
)
@click.option("--list", "-l", "list_flag", is_flag=True, help="List all supported models")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=get_version(), prog_name="tokenizer")
@click.pass_context
def main(
    ctx: click.Context,
    text: tuple[str, ...],
    file_path: str | None,
    model: str | None,
    list_flag: bool,
    verbose: bool,
) -> None:
    """Count tokens for LLM models.

    Supports OpenAI, Meta Llama, Google Gemini, and Anthropic Claude models.
    Token counts are exact for OpenAI, Llama 3+, and Gemini. Claude uses
    estimation.

    \b
    Examples:
        tokenizer "Hello world, this is a test"
        tokenizer -f context.txt
        tokenizer -m gpt-4.1 -f prompt.md
        tokenizer --list
    """
    if text and text[0] == "help":
        click.echo(ctx.get_help())
        return

    config = TokenizerConfig.from_env()
    registry = build_default_registry()

    try:
        config.validate(registry)
    except ConfigurationError as e:
        print_error(str(e))
        sys.exit(1)

    config.configure_logging(verbose=verbose)

    if list_flag:
        print_model_list(registry, config.default_model)
        return

    try:
        content = read_input(file_path, text)
    except click.BadParameter as e:
        print_error(e.message)
        sys.exit(1)

    model_name = model or config.default_model
    logger.debug(f"Counting {len(content)} characters with {model_name}")

    try:
        result = registry.count_tokens(content, model_name)
    except TokenizerCliError as e:
        print_error(str(e))
        sys.exit(1)

    print_result(result)


if __name__ == "__main__":
    main()
