"""Canned Groq responses for testing.

Shapes follow the OpenAI-compatible chat completions API so they can be
replayed through respx without calling Groq.
"""

from __future__ import annotations

from typing import Any


GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"


def create_groq_response(
    content: str | None,
    model: str = "llama-3.1-8b-instant",
    prompt_tokens: int = 10,
    completion_tokens: int = 5,
) -> dict[str, Any]:
    """Factory for creating mock Groq responses."""
    return {
        "id": "chatcmpl-abc123",
        "model": model,
        "created": 1700000000,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    }


GROQ_STRUCTURED_RESPONSE: dict[str, Any] = create_groq_response(
    content='{"title": "Test", "items": ["a", "b", "c"]}',
    prompt_tokens=25,
    completion_tokens=15,
)


SEARCH_INTENT_RESPONSE: dict[str, Any] = create_groq_response(
    content='{"keyword": "curry", "cuisine": "Indian", "diet": "vegetarian"}',
    prompt_tokens=60,
    completion_tokens=20,
)


SHOPPING_LIST_RESPONSE: dict[str, Any] = create_groq_response(
    content="""```json
{
    "items": [
        {"item": "basmati rice", "quantity": 2, "unit": "cups"},
        {"item": "garam masala", "quantity": "1", "unit": "jar"}
    ]
}
```""",
    prompt_tokens=80,
    completion_tokens=45,
)


SCAN_ANALYSIS_RESPONSE: dict[str, Any] = create_groq_response(
    model="meta-llama/llama-4-scout-17b-16e-instruct",
    content="""{
    "detected_dish": {"name": "Fridge shelf", "confidence": 0.81, "is_food": true},
    "detected_ingredients": [
        {"name": "eggs", "quantity": "6", "confidence": 0.95},
        {"name": "spinach", "quantity": "1 bag", "confidence": 0.7}
    ],
    "recipes": [
        {
            "name": "Spinach Omelette",
            "cuisine": "French",
            "match_percent": 91.6,
            "missing_ingredients": ["butter", " ", 3],
            "cooking_time_minutes": "15",
            "difficulty": "easy",
            "description": "Fluffy eggs folded over wilted spinach.",
            "calories_per_serving": 320,
            "servings": 2,
            "search_query": "spinach omelette"
        }
    ]
}""",
    prompt_tokens=1200,
    completion_tokens=220,
)
