from pathlib import Path

from audio_reader.ai.exceptions import AIClientError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled prompt by file name.

    Args:
        name: File name inside the prompt directory, e.g. ``cleanup_prompt.txt``.
        prompt_dir: Directory to read from. Defaults to the bundled prompts.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        AIClientError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AIClientError(f"Failed to load prompt {name}: {exc}") from exc
