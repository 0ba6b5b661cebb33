from backend.prompts import BASE_PROMPT, build_prompt


def test_build_prompt_without_message() -> None:
    assert build_prompt() == BASE_PROMPT
    assert build_prompt("") == BASE_PROMPT
    assert build_prompt("   ") == BASE_PROMPT


def test_build_prompt_appends_message() -> None:
    assert build_prompt("Use a dark theme") == f"{BASE_PROMPT} Use a dark theme"


def test_base_prompt_asks_for_code_only() -> None:
    assert "Tailwind" in BASE_PROMPT
    assert "Output ONLY the code" in BASE_PROMPT
