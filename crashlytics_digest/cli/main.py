"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .generate import generate, json_report, status, text

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="crashlytics-digest",
    help="Daily crash digest from Crashlytics CSV exports",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


# All commands including main command support -h shorthand via context_settings


app.command(name="generate", context_settings={"help_option_names": ["-h", "--help"]})(
    generate
)
app.command(name="text", context_settings={"help_option_names": ["-h", "--help"]})(
    text
)
app.command(name="json", context_settings={"help_option_names": ["-h", "--help"]})(
    json_report
)
app.command(name="status", context_settings={"help_option_names": ["-h", "--help"]})(
    status
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from crashlytics_digest import __version__

    console.print(f"Crashlytics Digest v{__version__}")


if __name__ == "__main__":
    app()
