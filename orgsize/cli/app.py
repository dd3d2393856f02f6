"""
Main CLI application for orgsize.

Defines the Typer application structure and command routing.
"""
import typer

from orgsize.cli.commands.report import report_command


# Initialize Typer app
app = typer.Typer(help="orgsize - npm organization package size report")

# Register commands
app.command("report", help="Report the unpacked size of every package in an npm organization.")(report_command)
