"""
Main Typer application for the kickstart CLI.

This module defines the root CLI application and its commands.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from kickstart import __version__
from kickstart.cli.output import (
    console,
    print_answers_json,
    print_answers_table,
    print_error,
    print_info,
    print_success,
    print_table,
    print_warning,
)
from kickstart.config import Config, ConfigurationError, build_answers_from_options, load_config
from kickstart.exceptions import KickstartError, UserCancelledError
from kickstart.storage.paths import get_log_path
from kickstart.utils.logging import configure_logging
from kickstart.utils.package_managers import default_package_manager, detect_package_managers
from kickstart.wizard import Answers, WizardFlow
from kickstart.wizard.keyboard import (
    KeyboardNavigator,
    NullKeyboardNavigator,
    install_exit_handlers,
    keyboard_navigator,
)
from kickstart.wizard.registry import STEP_CLASSES
from kickstart.wizard.ui.rich_renderer import RichRenderer

logger = logging.getLogger(__name__)

# Conventional exit status for SIGINT
EXIT_CANCELLED = 130

# Create the main Typer app
app = typer.Typer(
    name="kickstart",
    help="Interactive setup wizard for new React projects.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"kickstart version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold cyan]kickstart[/bold cyan] - React project setup wizard

    Walks through the choices for a new Vite or Next.js project, with
    back navigation at every step.
    """


def _load_config() -> Config:
    try:
        return load_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def _log_file(config: Config) -> Path | None:
    if config.logging.file is not None:
        return config.logging.file
    if config.logging.to_file:
        return get_log_path()
    return None


def _select_keyboard(config: Config) -> KeyboardNavigator:
    if not config.wizard.keyboard_shortcuts:
        return NullKeyboardNavigator()

    keyboard_navigator.configure(config.wizard.back_keys)
    install_exit_handlers(keyboard_navigator)
    return keyboard_navigator


def _run_wizard(config: Config) -> Answers:
    """Run the interactive wizard and return its answers."""
    keyboard = _select_keyboard(config)
    managers = detect_package_managers()

    renderer = RichRenderer(
        console=Console(no_color=not config.ui.color),
        keyboard=keyboard,
        show_logo=config.wizard.show_logo,
    )
    flow = WizardFlow(
        renderer,
        keyboard=keyboard,
        package_managers=managers,
        default_package_manager=(
            config.wizard.default_package_manager or default_package_manager(managers)
        ),
    )

    try:
        return asyncio.run(flow.run())
    finally:
        keyboard.cleanup()


@app.command()
def create(
    directory: Annotated[
        str | None,
        typer.Argument(help="Project directory (defaults to the current directory)."),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the wizard and use defaults plus options."),
    ] = False,
    framework: Annotated[
        str | None,
        typer.Option("--framework", "-f", help="Framework: vite or nextjs."),
    ] = None,
    typescript: Annotated[
        bool,
        typer.Option("--typescript", help="Use TypeScript."),
    ] = False,
    styling: Annotated[
        str | None,
        typer.Option("--styling", help="Styling: tailwind, styled-components or css."),
    ] = None,
    state: Annotated[
        str | None,
        typer.Option("--state", help="State management: redux, zustand or none."),
    ] = None,
    api: Annotated[
        str | None,
        typer.Option("--api", help="API client setup."),
    ] = None,
    testing: Annotated[
        str | None,
        typer.Option("--testing", help="Testing framework: vitest, jest or none."),
    ] = None,
    routing: Annotated[
        str | None,
        typer.Option("--routing", help="Routing library for Vite: react-router or none."),
    ] = None,
    next_routing: Annotated[
        str | None,
        typer.Option("--next-routing", help="Next.js router: app or pages."),
    ] = None,
    package_manager: Annotated[
        str | None,
        typer.Option("--package-manager", "-p", help="Package manager: npm or yarn."),
    ] = None,
    linting: Annotated[
        bool,
        typer.Option("--linting/--no-linting", help="Include ESLint and Prettier."),
    ] = True,
    git: Annotated[
        bool,
        typer.Option("--git/--no-git", help="Initialize a git repository."),
    ] = True,
    autostart: Annotated[
        bool,
        typer.Option("--autostart/--no-autostart", help="Start the dev server after creation."),
    ] = True,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the answers as JSON."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Collect the setup choices for a new project."""
    config = _load_config()
    configure_logging("DEBUG" if verbose else config.logging.level, _log_file(config))

    project_path = Path(directory).expanduser().resolve() if directory else Path.cwd()
    logger.debug("Project path: %s", project_path)

    if yes:
        try:
            answers = build_answers_from_options(
                framework,
                typescript=typescript,
                styling=styling,
                state=state,
                api=api,
                testing=testing,
                routing=routing,
                next_routing=next_routing,
                package_manager=package_manager,
                linting=linting,
                git=git,
                autostart=autostart,
            )
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(1) from e
    else:
        try:
            answers = _run_wizard(config)
        except UserCancelledError as e:
            print_warning("Setup cancelled")
            raise typer.Exit(EXIT_CANCELLED) from e
        except KickstartError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

    if json_output:
        print_answers_json(answers)
        return

    print_answers_table(answers, title=f"Project setup: {project_path.name}")
    print_success(f"Configuration ready for [bold]{project_path}[/bold]")


@app.command()
def steps() -> None:
    """List the wizard steps in order with the answers each one sets."""
    rows = [
        [cls.ordinal, cls.name, cls.title, ", ".join(field.value for field in cls.fields)]
        for cls in STEP_CLASSES
    ]
    print_table(["#", "Step", "Title", "Sets"], rows, title="Wizard steps")
    console.print(
        "[dim]nextjs_options and routing share a slot; only one is shown per project.[/dim]"
    )


if __name__ == "__main__":
    app()
