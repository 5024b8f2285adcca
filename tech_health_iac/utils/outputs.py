"""
Writes resolved stack outputs to a dotenv-style file for local development.
"""

from pathlib import Path

import pulumi


def _format_env(values: dict[str, object]) -> str:
    lines = [f"{key.upper()}={'' if value is None else value}" for key, value in sorted(values.items())]
    return "\n".join(lines) + "\n"


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[str]],
    filename: str | Path,
) -> pulumi.Output[str]:
    """
    Write stack outputs to an env file once every output has resolved.

    Nothing is written during preview, since outputs are still unknown.

    Args:
        outputs: Export name to output value
        filename: Destination file path

    Returns:
        Output resolving to the path written (or an empty string on preview)
    """
    path = Path(filename)

    def _write(resolved: dict[str, object]) -> str:
        if pulumi.runtime.is_dry_run():
            pulumi.log.debug(f"Preview run, not writing {path}")
            return ""
        path.write_text(_format_env(resolved))
        pulumi.log.info(f"Wrote {len(resolved)} outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
