"""CLI entry point for ccicheck"""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.markup import escape
from pathlib import Path
from typing import Optional

from ccicheck.exceptions import CCICheckError, ManifestLoadError
from ccicheck.models.inputs import INPUT_ENV_VARS

app = typer.Typer(
    name="ccicheck",
    help="Check Huawei Cloud CCI deployment action inputs",
    add_completion=False
)
console = Console()

# Exit codes: 1 = inputs rejected, 2 = manifest could not be loaded
REJECTED_EXIT_CODE = 1
FAULT_EXIT_CODE = 2


def handle_ccicheck_error(error: CCICheckError, exit_code: int = REJECTED_EXIT_CODE):
    """Handle ccicheck errors with Rich formatting

    Args:
        error: ccicheck exception to handle
        exit_code: Exit code to use
    """
    if error.help_text:
        panel_content = f"{escape(error.message)}\n\n[bold cyan]Help:[/bold cyan]\n{escape(error.help_text)}"
    else:
        panel_content = escape(error.message)

    panel = Panel(
        panel_content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        expand=False
    )

    console.print(panel)
    raise typer.Exit(exit_code)


def handle_unexpected_error(error: Exception, exit_code: int = 1):
    """Handle unexpected errors with Rich formatting

    Args:
        error: Exception to handle
        exit_code: Exit code to use
    """
    error_text = Text()
    error_text.append("✗ Unexpected Error: ", style="bold red")
    error_text.append(str(error))

    console.print(error_text)
    console.print("\n[yellow]This is an unexpected error. Please report this issue.[/yellow]")
    console.print(f"[dim]Error type: {type(error).__name__}[/dim]")

    raise typer.Exit(exit_code)


def _print_result(result):
    if result.passed:
        console.print(f"[green]✓[/green] {result.name}")
    else:
        console.print(f"[red]✗[/red] {result.name}: {result.message}")


@app.command()
def validate(
    access_key: Optional[str] = typer.Option(None, "--access-key", envvar=INPUT_ENV_VARS["access_key"], help="Access key (AK)"),
    secret_key: Optional[str] = typer.Option(None, "--secret-key", envvar=INPUT_ENV_VARS["secret_key"], help="Secret key (SK)"),
    project_id: Optional[str] = typer.Option(None, "--project-id", envvar=INPUT_ENV_VARS["project_id"], help="Project ID"),
    region: Optional[str] = typer.Option(None, "--region", envvar=INPUT_ENV_VARS["region"], help="CCI region"),
    namespace: Optional[str] = typer.Option(None, "--namespace", envvar=INPUT_ENV_VARS["namespace"], help="CCI namespace"),
    deployment: Optional[str] = typer.Option(None, "--deployment", envvar=INPUT_ENV_VARS["deployment"], help="Deployment name"),
    manifest: Optional[str] = typer.Option(None, "--manifest", envvar=INPUT_ENV_VARS["manifest"], help="Deployment manifest (yaml)"),
    image: Optional[str] = typer.Option(None, "--image", envvar=INPUT_ENV_VARS["image"], help="Image to deploy"),
    inputs_file: Optional[Path] = typer.Option(None, "--inputs-file", help="YAML file with the inputs"),
):
    """Check deployment inputs before calling the CCI API"""
    from ccicheck.commands.validate import ValidateCommand
    from ccicheck.models.inputs import DeployInputs
    from ccicheck.utils.sinks import console_sink

    console.print("[bold blue]Validating deployment inputs...[/bold blue]")

    overrides = {
        "access_key": access_key,
        "secret_key": secret_key,
        "project_id": project_id,
        "region": region,
        "namespace": namespace,
        "deployment": deployment,
        "manifest": manifest,
        "image": image,
    }

    try:
        base = DeployInputs.from_yaml(inputs_file) if inputs_file else DeployInputs()
        inputs = base.merged(overrides)

        validate_cmd = ValidateCommand(inputs, info=console_sink(console), on_result=_print_result)
        validate_cmd.execute()

        console.print("[green]✓[/green] Validation passed")

    except ManifestLoadError as e:
        # a fault, not a rejected input
        handle_ccicheck_error(e, exit_code=FAULT_EXIT_CODE)
    except CCICheckError as e:
        handle_ccicheck_error(e)
    except Exception as e:
        handle_unexpected_error(e)


@app.command()
def regions():
    """List regions where CCI deployments are supported"""
    from rich.table import Table
    from ccicheck.validation import SUPPORTED_REGIONS

    table = Table(title="Supported CCI Regions")
    table.add_column("Region", style="cyan")

    for region_id in sorted(SUPPORTED_REGIONS):
        table.add_row(region_id)

    console.print(table)


@app.command()
def version():
    """Display CLI version"""
    import importlib.metadata
    from ccicheck import __version__

    try:
        cli_version = importlib.metadata.version("ccicheck")
    except importlib.metadata.PackageNotFoundError:
        cli_version = __version__

    console.print(f"ccicheck version: [green]{cli_version}[/green]")


if __name__ == "__main__":
    app()
