import locale

import fquery.cli.scan  # noqa
from fquery.cli.application import app
from fquery.commons.metadata import __VERSION__
from fquery.commons.ui import err_console, prn_dbg


@app.callback()
def main():
    # Sort font names the way the user's locale does
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        prn_dbg(f"Keeping default collation: {e}")
    err_console.print(f"[reverse white] FQuery [/][reverse blue bold] {__VERSION__} [/]")


@app.command(name="version", short_help="Show the version and exit")
def version() -> None:
    """Show the version and exit"""
    print(__VERSION__)


if __name__ == "__main__":
    app()
