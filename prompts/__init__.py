"""System prompts for the study planner's LLM calls, stored as ``<name>.txt`` files."""
from pathlib import Path
import typing as t

PROMPTS_DIR = Path(__file__).resolve().parent


def load_prompt(prompt_name: str, prompts_dir: t.Optional[t.Union[str, Path]] = None) -> str:
    """
    Read a prompt and strip surrounding whitespace.

    Args:
        prompt_name: File name without the .txt extension, e.g. "prioritizer_system_prompt".
        prompts_dir: Directory to look in. Defaults to PROMPTS_DIR.

    Returns:
        The prompt text.

    Raises:
        FileNotFoundError: If there is no such prompt.
    """
    prompt_file = Path(prompts_dir or PROMPTS_DIR) / f"{prompt_name}.txt"
    if not prompt_file.is_file():
        raise FileNotFoundError(f"Prompt file not found: {prompt_file}")
    return prompt_file.read_text(encoding="utf-8").strip()
