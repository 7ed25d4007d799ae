"""Formatting utilities for CLI output using Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from tokenizer_cli.registry import ProviderRegistry, Result

# Shared console instances for consistent output
console = Console()
err_console = Console(stderr=True)

EXACT_ICON = "✓"
ESTIMATE_ICON = "≈"
DEFAULT_ICON = "★"


def format_accuracy(is_exact: bool) -> tuple[str, str]:
    """Return the (icon, label) pair for an accuracy flag.

    Args:
        is_exact: Whether the count is exact.

    Returns:
        ("✓", "exact") or ("≈", "estimated").
    """
    if is_exact:
        return EXACT_ICON, "exact"
    return ESTIMATE_ICON, "estimated"


def print_error(msg: str) -> None:
    """Print an error message in red to stderr.

    Args:
        msg: The error message to display.
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(msg)}")


def print_result(result: Result) -> None:
    """Print a token count result in a panel.

    Args:
        result: The result to display.
    """
    icon, label = format_accuracy(not result.is_estimate)
    accuracy_style = "red" if result.is_estimate else "green"

    body = Text()
    body.append("Model:    ")
    body.append(result.model, style="bold magenta")
    body.append("\nProvider: ")
    body.append(result.provider, style="yellow")
    body.append("\nTokens:   ")
    body.append(str(result.token_count), style="bold green")
    body.append(f" ({icon} {label})", style=accuracy_style)

    console.print()
    console.print(Panel(body, title="🔢 Token Count Result", border_style="cyan", expand=False))
    console.print()


def print_model_list(registry: ProviderRegistry, default_model: str) -> None:
    """Print the supported models grouped by provider.

    Providers are shown in name order. The default model is starred.

    Args:
        registry: Registry to list.
        default_model: Model to mark as the default.
    """
    models = registry.list_models()

    console.print()
    console.print(Panel("📋 Supported LLM Models", border_style="cyan", expand=False))
    console.print()

    for provider in sorted(models):
        model_names = models[provider]
        if not model_names:
            continue

        info = registry.get_provider_info(model_names[0])
        icon, label = format_accuracy(info.is_exact)

        console.print(
            f"  [bold yellow]{icon} {escape(provider)}[/bold yellow] [dim red]({label})[/dim red]"
        )
        for model in model_names:
            if model == default_model:
                console.print(
                    f"    [green]▸ {escape(model)}[/green] "
                    f"[bold green]{DEFAULT_ICON} default[/bold green]"
                )
            else:
                console.print(f"    ▸ {escape(model)}")
        console.print()

    console.print(
        f"  [dim]Legend: {DEFAULT_ICON} default model  |  "
        f"{EXACT_ICON} exact count  |  {ESTIMATE_ICON} estimated count[/dim]"
    )
    console.print()
