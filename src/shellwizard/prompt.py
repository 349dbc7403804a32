"""Prompt construction for shellwizard."""

SYSTEM_PROMPT = """\
You are an expert Command Line Interface (CLI) assistant.
Rules:
1. Be concise.
2. If the user asks for a command, provide it in a markdown code block (e.g., ```bash ... ```).
3. Context provided below describes the user's current environment."""

DEFAULT_QUESTION = "Explain this output and suggest a fix if there is an error."


def build_prompt(question: str, piped_context: str, env_text: str) -> str | None:
    """Assemble the full request text, or None when there is nothing to ask."""
    if not question and not piped_context:
        return None
    if not question:
        question = DEFAULT_QUESTION

    parts = [SYSTEM_PROMPT, f"System Info:\n{env_text}"]
    if piped_context:
        parts.append(f"Input Context:\n{piped_context}")
    parts.append(f"User Question:\n{question}")
    return "\n\n".join(parts)
