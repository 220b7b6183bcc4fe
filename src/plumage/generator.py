"""Optional documentation generation before serving.

Runs an external generator (``swag init`` by default) once, synchronously,
before the router is built. The outcome is logged and returned; it never
reaches the request path, and a missing or failing tool never stops the UI
from serving whatever specification is already on disk.
"""

import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from plumage.config import DocsConfig

logger = logging.getLogger("plumage.generator")


class GenerationStatus(StrEnum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class GenerationOutcome:
    """What happened when the generator was (or wasn't) run."""

    status: GenerationStatus
    command: tuple[str, ...] = ()
    returncode: int | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """True unless the generator ran and failed."""
        return self.status is not GenerationStatus.FAILED


def build_command(config: DocsConfig) -> tuple[str, ...]:
    """The full argv for the generator described by *config*."""
    return (
        *config.generator_command,
        "-d",
        config.search_dir or ".",
        "-o",
        config.output_dir or "./docs",
        *config.generator_args,
    )


def generate_docs(
    config: DocsConfig,
    *,
    which: Callable[[str], str | None] | None = None,
    run: Callable[..., subprocess.CompletedProcess] | None = None,
) -> GenerationOutcome:
    """Run the external generator described by *config*.

    Blocks until the tool exits. Output goes straight to this process's
    stdout/stderr. *which* and *run* exist so tests can stand in for the
    executable lookup and the subprocess.
    """
    which = which or shutil.which
    run = run or subprocess.run
    executable = config.generator_command[0]
    if which(executable) is None:
        message = f"{executable} command not found, skipping documentation generation"
        logger.warning("%s", message)
        return GenerationOutcome(GenerationStatus.SKIPPED, message=message)

    command = build_command(config)
    logger.info("Generating API documentation: %s", " ".join(command))
    if config.generator_args:
        logger.info("Using custom generator args: %s", list(config.generator_args))

    try:
        completed = run(list(command), check=False)
    except OSError as exc:
        message = f"Failed to run {executable}: {exc}"
        logger.error("%s", message)
        return GenerationOutcome(GenerationStatus.FAILED, command=command, message=message)

    if completed.returncode != 0:
        message = f"{executable} exited with status {completed.returncode}"
        logger.error("Failed to generate API documentation: %s", message)
        return GenerationOutcome(
            GenerationStatus.FAILED,
            command=command,
            returncode=completed.returncode,
            message=message,
        )

    logger.info("API documentation generated in %s", config.output_dir)
    return GenerationOutcome(
        GenerationStatus.SUCCEEDED,
        command=command,
        returncode=0,
        message="generated",
    )
