"""Command table for ``specgen-app``.

Each operator-facing command maps to exactly one npm script defined in the
package's ``package.json``. Names are mostly identical; ``backup`` and
``restore`` target the database scripts.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    name: str
    script: str
    description: str


_COMMAND_SPECS = [
    CommandSpec("setup", "setup", "Set up the SpecGen application"),
    CommandSpec(
        "setup-low-memory",
        "setup-low-memory",
        "Set up the SpecGen application on a low-memory host",
    ),
    CommandSpec("dev", "dev", "Run the application in development mode"),
    CommandSpec("build", "build", "Build the admin and user applications"),
    CommandSpec("start", "start", "Start the server"),
    CommandSpec("deploy", "deploy", "Deploy the application locally"),
    CommandSpec("deploy:ec2", "deploy:ec2", "Deploy the application to EC2"),
    CommandSpec("deploy:stop", "deploy:stop", "Stop the deployed application"),
    CommandSpec("deploy:restart", "deploy:restart", "Restart the deployed application"),
    CommandSpec("deploy:update", "deploy:update", "Update the deployed application"),
    CommandSpec("deploy:status", "deploy:status", "Show the status of the deployed application"),
    CommandSpec("deploy:backup", "deploy:backup", "Back up the deployed application"),
    CommandSpec("backup", "backup:database", "Create a backup of the database"),
    CommandSpec("restore", "restore:database", "Restore the database from backup"),
    CommandSpec("production", "production", "Run the application in production mode"),
    CommandSpec(
        "production-low-memory",
        "production-low-memory",
        "Run in production mode on a low-memory host",
    ),
    CommandSpec("troubleshoot", "troubleshoot", "Diagnose common setup and deployment problems"),
]

COMMANDS: dict[str, CommandSpec] = {spec.name: spec for spec in _COMMAND_SPECS}


def resolve_command(name: str | None) -> CommandSpec | None:
    if not name:
        return None
    return COMMANDS.get(name)


def usage_text(prog_name: str = "specgen-app") -> str:
    width = max(len(name) for name in COMMANDS)
    lines = [f"Usage: {prog_name} <command>", "", "Available commands:"]
    for spec in COMMANDS.values():
        lines.append(f"  {spec.name.ljust(width)} - {spec.description}")
    return "\n".join(lines)
