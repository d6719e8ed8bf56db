"""Messaging contracts — queues and topics.

``Messenger`` delivers received messages through callbacks;
``ReactiveMessenger`` exposes them as an async iterator instead.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from cloudcore.contracts.access import EntityConfig, SignedAccessConfig

MessageProperties = Mapping[str, Any]


class EntityMessageCount(BaseModel):
    """Active and errored message counts; ``-1`` means not yet known."""

    errored_entity_count: int = -1
    active_entity_count: int = -1


@runtime_checkable
class MessageEntity[T](Protocol):
    """A received message body together with its broker properties."""

    body: T
    properties: dict[str, Any]

    def get_properties_typed[P](self, model: type[P]) -> P: ...


@runtime_checkable
class MessageOperations(Protocol):
    name: str

    async def receive_one[T](self, model: type[T]) -> T | None: ...

    async def receive_one_entity[T](self, model: type[T]) -> MessageEntity[T] | None: ...

    async def receive_batch[T](self, model: type[T], batch_size: int) -> list[T]: ...

    async def receive_batch_entity[T](
        self, model: type[T], batch_size: int
    ) -> list[MessageEntity[T]]: ...

    async def receive_deferred_batch[T](
        self, model: type[T], identities: Iterable[int]
    ) -> list[T]: ...

    def read_properties(self, message: Any) -> dict[str, Any]: ...

    async def complete(self, message: Any) -> None: ...

    async def complete_all(self, messages: Iterable[Any]) -> None: ...

    async def abandon(
        self, message: Any, properties_to_modify: MessageProperties | None = None
    ) -> None: ...

    async def defer(
        self, message: Any, properties_to_modify: MessageProperties | None = None
    ) -> None: ...

    async def error(self, message: Any, reason: str | None = None) -> None: ...

    def get_signed_access_url(self, access_config: SignedAccessConfig) -> str: ...


@runtime_checkable
class MessageEntityManager(Protocol):
    async def get_receiver_entity_usage_percentage(self) -> float: ...

    async def get_sender_entity_usage_percentage(self) -> float: ...

    async def is_receiver_entity_disabled(self) -> bool: ...

    async def is_sender_entity_disabled(self) -> bool: ...

    async def get_receiver_message_count(self) -> EntityMessageCount: ...

    async def get_sender_message_count(self) -> EntityMessageCount: ...

    async def create_entity(self, config: EntityConfig) -> None: ...

    async def entity_exists(self, entity_name: str) -> bool: ...

    async def delete_entity(self, entity_name: str) -> None: ...


@runtime_checkable
class SendMessages(Protocol):
    async def send(self, message: Any, properties: MessageProperties | None = None) -> None: ...

    async def send_batch(
        self,
        messages: Iterable[Any],
        properties: MessageProperties | Callable[[Any], MessageProperties] | None = None,
        batch_size: int = 100,
    ) -> None: ...

    def close(self) -> None: ...


@runtime_checkable
class Messenger(SendMessages, MessageOperations, Protocol):
    @property
    def entity_manager(self) -> MessageEntityManager: ...

    def receive[T](
        self,
        model: type[T],
        on_success: Callable[[T], None],
        on_error: Callable[[BaseException], None] | None = None,
        batch_size: int = 10,
    ) -> None: ...

    def cancel_receive(self, model: type[Any]) -> None: ...


@runtime_checkable
class ReactiveMessenger(SendMessages, MessageOperations, Protocol):
    @property
    def entity_manager(self) -> MessageEntityManager: ...

    def start_receive[T](self, model: type[T], batch_size: int = 10) -> AsyncIterator[T]: ...

    def cancel_receive(self, model: type[Any]) -> None: ...

    async def update_receiver(
        self,
        entity_name: str,
        entity_subscription_name: str | None = None,
        create_if_not_exists: bool = False,
        entity_filter: tuple[str, str] | None = None,
        entity_deadletter_name: str | None = None,
    ) -> None: ...
