from app.client.admin_gate import AdminGate
from app.client.api import ApiClient, ApiError
from app.client.categories import CategoryManager
from app.client.notifications import Notification, Notifier
from app.client.orchestrator import TranslationOrchestrator
from app.client.resolver import TextResolver
from app.client.session import ClientConfig, ClientSession
from app.client.storage import LocalStorage
from app.client.translation_cache import TranslationCache, TranslationState

__all__ = [
    "AdminGate",
    "ApiClient",
    "ApiError",
    "CategoryManager",
    "ClientConfig",
    "ClientSession",
    "LocalStorage",
    "Notification",
    "Notifier",
    "TextResolver",
    "TranslationCache",
    "TranslationOrchestrator",
    "TranslationState",
]
