"""Config serializers."""

from cachegen.infrastructure.serializers.json import JsonConfigSerializer

__all__ = ["JsonConfigSerializer"]
