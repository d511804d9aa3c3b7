"""Pydantic DTOs validating adapter wire payloads."""

from .messages_request import MessagesRequestDTO, WireMessageDTO

__all__ = ["MessagesRequestDTO", "WireMessageDTO"]
