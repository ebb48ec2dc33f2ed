"""Session variables shared with prompt scripts, and the script interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class GlobalVariables:
    """State of the session that scripts may look at."""

    current_working_dir: Path = field(default_factory=Path.cwd)
    previous_working_dir: Path = field(default_factory=Path.cwd)
    last_loaded_code_path: Path | None = None
    last_output: str | None = None
    operation_number: int = 1
    prompt_position: tuple[int, int] = (0, 0)
    prompt_len: int = 0

    def update_cwd(self, cwd: Path | str) -> None:
        """Record a directory change, remembering the previous directory."""
        self.previous_working_dir = self.current_working_dir
        self.current_working_dir = Path(cwd)

    def set_last_output(self, output: str) -> None:
        self.last_output = output

    def set_last_loaded_code_path(self, path: Path | str) -> None:
        self.last_loaded_code_path = Path(path)


class Script:
    """Hooks a script can provide; None means the default is kept."""

    def input_prompt(self, global_variables: GlobalVariables) -> str | None:
        return None

    def output_prompt(self, global_variables: GlobalVariables) -> str | None:
        return None


class NumberedPromptScript(Script):
    """Prompts prefixed with the number of the current evaluation."""

    def input_prompt(self, global_variables: GlobalVariables) -> str | None:
        return f"In [{global_variables.operation_number}]: "

    def output_prompt(self, global_variables: GlobalVariables) -> str | None:
        return f"Out[{global_variables.operation_number}]: "


def resolve_output_prompt(
    script: Script | None, global_variables: GlobalVariables, default: str
) -> str:
    """The script's output prompt if it gives one, otherwise default."""
    if script is not None:
        prompt = script.output_prompt(global_variables)
        if prompt is not None:
            return prompt
    return default