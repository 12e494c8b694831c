from .export import export_subscriptions, serialize_subscriptions
from .importers.dispatcher import import_subscriptions

__all__ = ["export_subscriptions", "import_subscriptions", "serialize_subscriptions"]
