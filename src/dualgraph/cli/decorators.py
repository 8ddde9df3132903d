from __future__ import annotations

import functools
import sys
from typing import TYPE_CHECKING, Any

import click

from dualgraph import exceptions, metrics

if TYPE_CHECKING:
    from collections.abc import Callable


def handle_graph_error(e: exceptions.GraphError) -> click.ClickException:
    """Convert GraphError to user-friendly ClickException."""
    message = e.format_user_message()
    if suggestion := e.get_suggestion():
        message = f"{message}\n\nTip: {suggestion}"
    return click.ClickException(message)


def with_error_handling[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap function with dualgraph error handling."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except exceptions.GraphError as e:
            raise handle_graph_error(e) from e
        except Exception as e:
            raise click.ClickException(repr(e)) from e

    return wrapper


def dualgraph_command(
    name: str | None = None, **attrs: Any
) -> Callable[[Callable[..., Any]], click.Command]:
    """Create a Click command with error handling and metrics reporting.

    Args:
        name: Optional command name (defaults to function name)
        **attrs: Additional arguments passed to click.command()
    """

    def decorator(func: Callable[..., Any]) -> click.Command:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                with metrics.timed(f"cli.{name or func.__name__}"):
                    return func(*args, **kwargs)
            finally:
                if metrics.is_enabled():
                    print_metrics_summary()

        return click.command(name=name, **attrs)(with_error_handling(wrapper))

    return decorator


def print_metrics_summary() -> None:
    """Print metrics summary to stderr."""
    lines = metrics.format_summary(metrics.summary())
    if not lines:
        return
    print("\nMetrics:", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
