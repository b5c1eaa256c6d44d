"""Closing summary shown after a successful run."""

from __future__ import annotations

from extscaffold.contracts.config import Archetype, ExtensionConfig, GeneratorSettings
from extscaffold.contracts.exceptions import InstallError
from extscaffold.contracts.plan import TemplatePlan
from extscaffold.providers.installer import COMPILE_WEB_COMMAND, INSTALL_COMMANDS

EDITOR_COMMAND = "code-insiders ."
MORE_INFO = "For more information, also visit http://code.visualstudio.com and follow us @code."


def build_summary(
    config: ExtensionConfig,
    plan: TemplatePlan,
    settings: GeneratorSettings,
    install_error: InstallError | None = None,
) -> list[str]:
    """Lines telling the user where the project is and how to open it."""
    pm = config.package_manager.value
    install_hint = " ".join(INSTALL_COMMANDS[config.package_manager])
    needs_install = plan.install_dependencies and (settings.skip_install or install_error is not None)

    if config.archetype is not None and config.archetype.creates_project:
        lines = [
            f"Your extension {config.identifier} has been created!",
            "",
            "To start editing with Visual Studio Code, use the following commands:",
            "",
            f"     cd {config.identifier}",
        ]
        if needs_install:
            lines.append(f"     {install_hint}")
        lines.extend([f"     {EDITOR_COMMAND}", ""])
        if plan.archetype is Archetype.NEW_SERVICE_EXTENSION:
            lines.append("Open vsc-extension-quickstart.md inside the new extension for further instructions")
            lines.append("on how to modify, test and publish your extension.")
        else:
            lines.append("Open README.md inside the new extension for further instructions.")
    else:
        lines = [
            "Your extension has been updated.",
            "",
            "To start editing with Visual Studio Code, use the following commands:",
            "",
        ]
        if needs_install:
            lines.append(f"     {install_hint}")
        lines.extend(
            [
                f"     {EDITOR_COMMAND}",
                f"     {pm} {COMPILE_WEB_COMMAND}",
            ]
        )

    lines.extend(["", MORE_INFO])
    return lines
