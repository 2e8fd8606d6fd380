from models import db
from models.model_registry import Brand, ModelEntry

DEFAULT_COLOR = "#6366f1"

# (key, display name, brand color); brand key and logo follow the model key
PREDEFINED_MODELS = [
    ("openai", "OpenAI", "#10a37f"),
    ("anthropic", "Anthropic", "#d97706"),
    ("gemini", "Gemini", "#4285f4"),
    ("deepseek", "DeepSeek", "#4d6bfe"),
    ("grok", "Grok", "#1d9bf0"),
    ("llama", "Llama", "#0668e1"),
    ("qwen", "Qwen", "#6c3baa"),
    ("mistral", "Mistral", "#f97316"),
    ("glm", "GLM", "#3b82f6"),
    ("cohere", "Cohere", "#39594d"),
    ("huggingface", "Hugging Face", "#ffbd45"),
    ("minimax", "MiniMax", "#6366f1"),
]


def predefined_brands():
    return [
        {"key": key, "name": name, "logo_filename": f"{key}.svg"}
        for key, name, _ in PREDEFINED_MODELS
    ]


def predefined_models():
    return [
        {
            "key": key,
            "name": name,
            "brand_key": key,
            "logo_filename": f"{key}.svg",
            "color": color,
        }
        for key, name, color in PREDEFINED_MODELS
    ]


def seed_catalog() -> tuple[int, int]:
    """Insert predefined brands/models that are missing. Returns (brands_added, models_added)."""
    existing_brands = {b.key for b in Brand.query.all()}
    existing_models = {m.key for m in ModelEntry.query.all()}

    brands_added = 0
    for item in predefined_brands():
        if item["key"] not in existing_brands:
            db.session.add(Brand(**item))
            brands_added += 1
    db.session.flush()

    models_added = 0
    for item in predefined_models():
        if item["key"] not in existing_models:
            db.session.add(ModelEntry(**item))
            models_added += 1

    db.session.commit()
    return brands_added, models_added
