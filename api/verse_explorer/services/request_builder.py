"""
Chat request construction for a verse analysis query.

Pure construction: the verse reference is not validated here, the caller is
expected to pass a trimmed, non-empty string.
"""

from verse_explorer.models.chat import ChatMessage, ChatRequest

DEFAULT_MODEL = "llama3-8b-8192"

USER_PROMPT_PREFIX = "Generate the analysis for: "

SYSTEM_PROMPT = """\
You are a biblical analysis expert. For the given verse, generate a multi-layered analysis.
Your entire response MUST be ONLY the JSON object.
DO NOT include any explanatory text, introduction, or markdown like ```json.
The JSON object must have the following exact structure. If a value is not available, \
use an empty string "" or an empty array [] instead of leaving the key out.
{
  "verse_reference": "string",
  "verse_text": "string",
  "context": "string",
  "exegesis": "string",
  "themes": "string",
  "cross_references": [
    { "reference": "string", "text": "string" }
  ]
}
Any double quote inside a string value MUST be escaped with a backslash (\\").
DO NOT leave a trailing comma after the last element of an object or array.
"""

# Sampling policy, fixed for every query.
TEMPERATURE = 0.5
MAX_TOKENS = 2048
TOP_P = 1


def build_user_prompt(verse_reference: str) -> str:
    return f"{USER_PROMPT_PREFIX}{verse_reference}"


def build_chat_request(
    verse_reference: str,
    credential: str,
    model: str = DEFAULT_MODEL,
) -> ChatRequest:
    """
    Assemble the chat-completion request for one verse.

    Args:
        verse_reference: The verse as entered by the user, e.g. "John 3:16".
        credential: Bearer token for the chat-completion endpoint.
        model: Model identifier sent with the request.

    Returns:
        ChatRequest with the system instructions, the user prompt and the
        fixed sampling parameters.
    """
    return ChatRequest(
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_user_prompt(verse_reference)),
        ],
        model=model,
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
        top_p=TOP_P,
        stop=None,
        stream=False,
        api_key=credential,
    )
