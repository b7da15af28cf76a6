"""
Configuration des tests pytest.
"""
import pytest
import sys
import os

# Ajoute src au path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from llm_streamliner.config import loader  # noqa: E402


# Configuration pytest-asyncio
def pytest_configure(config):
    """Configure pytest pour async."""
    config.addinivalue_line(
        "markers", "asyncio: marque un test comme asynchrone"
    )


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Isole le cache global de configuration entre les tests."""
    loader._clear_config_cache()
    yield
    loader._clear_config_cache()


@pytest.fixture
def long_context():
    """Contexte de plusieurs Ko, avec caractères multi-octets."""
    turns = []
    for i in range(200):
        turns.append(f"user: question {i} — où est passé le café ☕ ?")
        turns.append(f"assistant: réponse {i}, voir 日本語 et emoji 🚀")
    return "\n".join(turns)


@pytest.fixture
def sample_messages_text():
    """Historique conversationnel simple."""
    return (
        "system: Tu es un assistant utile.\n"
        "user: Bonjour, comment ça va?\n"
        "assistant: Je vais bien, merci!"
    )
