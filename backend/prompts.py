# backend/prompts.py

from typing import Optional

BASE_PROMPT = """You are an expert React developer. Analyze this design screenshot and generate a React component.

Requirements:
- Use React 19 with functional components
- Use TypeScript with proper types
- Use Tailwind CSS for styling
- Make it responsive
- Follow accessibility best practices
- Use semantic HTML

Output ONLY the code, no explanations or markdown code blocks."""


def build_prompt(message: Optional[str] = None) -> str:
    """
    Ghép prompt cố định với yêu cầu thêm của user (nếu có).
    """
    if not message or not message.strip():
        return BASE_PROMPT
    return f"{BASE_PROMPT} {message.strip()}"
