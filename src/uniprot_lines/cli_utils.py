"""CLI utility functions and helpers."""

import click

# Global flag for quiet mode
_quiet_mode = False


def set_quiet_mode(quiet: bool) -> None:
    """Set the global quiet mode flag."""
    global _quiet_mode
    _quiet_mode = quiet


def echo(message: str = "", err: bool = False, **kwargs) -> None:
    """Echo wrapper that respects quiet mode."""
    if _quiet_mode and not err:
        return
    click.echo(message, err=err, **kwargs)


def progressbar(iterable, **kwargs):
    """Progress bar wrapper that respects quiet mode."""
    if _quiet_mode:
        class DummyProgressBar:
            def __init__(self, items):
                self.items = items

            def __enter__(self):
                return self.items

            def __exit__(self, *args):
                pass

        return DummyProgressBar(iterable)

    kwargs.setdefault('label', '')
    return click.progressbar(iterable, **kwargs)
