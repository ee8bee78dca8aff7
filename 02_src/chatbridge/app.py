"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .channel import ChatwootClient, IChannelClient
from .config import Settings
from .handoff import HandoffController
from .logging_config import get_logger
from .responder import IResponder, create_responder
from .storage import SessionRegistry, TimelineStore

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Reset in-memory state between test runs."""
        ...

    @property
    def controller(self) -> HandoffController:
        """Handoff controller."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        channel: IChannelClient | None = None,
        responder: IResponder | None = None,
    ):
        self._settings = settings or Settings.from_env()

        # Overrides are used as-is; anything left None is built in start()
        self._channel: IChannelClient | None = channel
        self._responder: IResponder | None = responder
        self._registry: SessionRegistry | None = None
        self._timeline: TimelineStore | None = None
        self._controller: HandoffController | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Stores (no dependencies)
        self._registry = SessionRegistry()
        self._timeline = TimelineStore()

        # 2. Helpdesk channel
        if self._channel is None:
            self._channel = ChatwootClient(self._settings.channel)
        logger.info("Channel client initialized")

        # 3. Automated responder
        if self._responder is None:
            self._responder = create_responder(self._settings.responder)
        logger.info("Responder initialized")

        # 4. Controller (depends on everything above)
        self._controller = HandoffController(
            channel=self._channel,
            responder=self._responder,
            registry=self._registry,
            timeline=self._timeline,
            triggers=self._settings.triggers,
            contact_email_domain=self._settings.channel.contact_email_domain,
        )
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._controller = None
        if self._channel is not None:
            await self._channel.close()
            logger.info("Channel client closed")

    async def reset(self) -> None:
        """Reset in-memory state between test runs."""
        if self._controller is not None:
            self._controller.reset()
            logger.info("Reset complete")

    @property
    def settings(self) -> Settings:
        """Get settings."""
        return self._settings

    @property
    def controller(self) -> HandoffController:
        """Get handoff controller instance."""
        if self._controller is None:
            raise RuntimeError("Application not started")
        return self._controller

    @property
    def registry(self) -> SessionRegistry:
        """Get session registry instance."""
        if self._registry is None:
            raise RuntimeError("Application not started")
        return self._registry
