"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import click
import typer

from mix_uncertainty.cli.commands.catchability import check_catchability_cmd
from mix_uncertainty.cli.commands.diagnose import diagnose
from mix_uncertainty.cli.commands.prepare import prepare
from mix_uncertainty.exceptions import (
    ConfigValidationError,
    DataShapeError,
    FitResultError,
    InsufficientDataError,
    ModelVariantError,
)
from mix_uncertainty.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Mixed-fishery effort-share preprocessing and fit diagnostics")


app.command()(prepare)
app.command("check-catchability")(check_catchability_cmd)
app.command()(diagnose)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code)
    except ConfigValidationError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except InsufficientDataError as exc:
        log.error(f"Insufficient data: {exc}")
        raise SystemExit(2)
    except DataShapeError as exc:
        log.error(f"Malformed input: {exc}")
        raise SystemExit(3)
    except (FitResultError, ModelVariantError) as exc:
        log.error(f"Unusable fit result: {exc}")
        raise SystemExit(4)
    except KeyboardInterrupt:
        log.info("Shutdown requested")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    sys.exit(main())
