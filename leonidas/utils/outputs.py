"""Step outputs for the invoking workflow."""

import tempfile
import time
import uuid
from pathlib import Path

import click


def write_outputs(outputs: dict[str, str], output_path: str | Path | None = None) -> None:
    """Append ``key=value`` pairs to the ``$GITHUB_OUTPUT`` file.

    Multi-line values use the heredoc form. Without an output file the pairs
    are echoed to stdout.
    """
    lines = []
    for key, value in outputs.items():
        if "\n" in value:
            delimiter = f"leonidas_{uuid.uuid4().hex}"
            lines.append(f"{key}<<{delimiter}\n{value}\n{delimiter}")
        else:
            lines.append(f"{key}={value}")

    if output_path is None:
        for line in lines:
            click.echo(line)
        return

    with open(output_path, "a", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line}\n")


def write_prompt_file(prompt: str, directory: str | Path | None = None) -> Path:
    """Write the prompt to a file so it never passes through a shell."""
    target_dir = Path(directory) if directory else Path(tempfile.gettempdir())
    target_dir.mkdir(parents=True, exist_ok=True)
    prompt_file = target_dir / f"leonidas-prompt-{int(time.time() * 1000)}.md"
    prompt_file.write_text(prompt, encoding="utf-8")
    return prompt_file
