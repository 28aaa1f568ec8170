"""
Dishka DI Container Setup.

- AppProvider: LLM client, chat services and every command/query handler
  (handler limits and tier rules come from Config here, not from the routes)
- MemoryStorageProvider / PrismaStorageProvider: repository implementations,
  picked by Config.STORAGE_BACKEND

Scope.APP = created once and shared (LLM client, locks, in-memory database)
Scope.REQUEST = new instance per HTTP request (repositories, handlers)

Flow:
  Container → provides → InMemoryConversationRepository → to → SendMessageHandler
                                    ↓
                            uses ConversationRepository interface
"""

import logging
from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from flatmate.application.commands.appointments import (
    ScheduleViewingHandler,
    UpdateAppointmentStatusHandler,
)
from flatmate.application.commands.chat import SendMessageHandler
from flatmate.application.commands.conversations import DeleteConversationHandler
from flatmate.application.commands.leases import AnalyzeLeaseHandler
from flatmate.application.queries.appointments import ListAppointmentsHandler
from flatmate.application.queries.chat import GetChatHistoryHandler
from flatmate.application.queries.conversations import ListConversationsHandler
from flatmate.application.queries.listings import GetListingHandler, GetListingsHandler
from flatmate.application.services import ConversationLocks, SearchParameterExtractor
from flatmate.config.settings import Config
from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.ports.repositories import (
    AppointmentRepository,
    ConversationRepository,
    ListingRepository,
    MessageRepository,
)
from flatmate.domain.services.intent_classifier import IntentClassifier
from flatmate.infrastructure.llm import OpenAILLMClient
from flatmate.infrastructure.persistence.memory import (
    InMemoryAppointmentRepository,
    InMemoryConversationRepository,
    InMemoryDatabase,
    InMemoryListingRepository,
    InMemoryMessageRepository,
)

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    `llm_client` replaces the OpenAI client (tests pass a fake).
    """

    def __init__(self, config=Config, llm_client: Optional[LLMClient] = None):
        super().__init__()
        self._config = config
        self._llm_client = llm_client

    # ==================== LLM ====================

    @provide(scope=Scope.APP)
    def get_llm_client(self) -> LLMClient:
        if self._llm_client is not None:
            return self._llm_client
        return OpenAILLMClient.from_config(self._config)

    # ==================== SERVICES ====================

    @provide(scope=Scope.APP)
    def get_intent_classifier(self) -> IntentClassifier:
        return IntentClassifier(self._config.SEARCH_KEYWORDS or None)

    @provide(scope=Scope.APP)
    def get_conversation_locks(self) -> ConversationLocks:
        return ConversationLocks(enabled=self._config.SERIALIZE_CONVERSATION_TURNS)

    @provide(scope=Scope.REQUEST)
    def get_search_parameter_extractor(
        self, llm_client: LLMClient
    ) -> SearchParameterExtractor:
        return SearchParameterExtractor(llm_client)

    # ==================== CHAT ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        listing_repository: ListingRepository,
        llm_client: LLMClient,
        classifier: IntentClassifier,
        extractor: SearchParameterExtractor,
        locks: ConversationLocks,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            listing_repo=listing_repository,
            llm_client=llm_client,
            classifier=classifier,
            extractor=extractor,
            locks=locks,
            title_length=self._config.CONVERSATION_TITLE_LENGTH,
        )

    @provide(scope=Scope.REQUEST)
    def get_chat_history_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> GetChatHistoryHandler:
        return GetChatHistoryHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
            default_limit=self._config.CONVERSATION_MESSAGE_LIMIT,
        )

    # ==================== CONVERSATIONS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(
            conversation_repository, default_limit=self._config.CONVERSATION_USER_LIMIT
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> DeleteConversationHandler:
        return DeleteConversationHandler(conversation_repository)

    # ==================== LISTINGS ====================

    @provide(scope=Scope.REQUEST)
    def get_listings_handler(
        self, listing_repository: ListingRepository
    ) -> GetListingsHandler:
        return GetListingsHandler(listing_repository)

    @provide(scope=Scope.REQUEST)
    def get_listing_handler(
        self, listing_repository: ListingRepository
    ) -> GetListingHandler:
        return GetListingHandler(listing_repository)

    # ==================== LEASES ====================

    @provide(scope=Scope.REQUEST)
    def get_analyze_lease_handler(self, llm_client: LLMClient) -> AnalyzeLeaseHandler:
        return AnalyzeLeaseHandler(
            llm_client,
            allowed_tiers=self._config.LEASE_ANALYSIS_TIERS,
            max_length=self._config.LEASE_TEXT_MAX_LENGTH,
            max_tokens=self._config.LEASE_ANALYSIS_MAX_TOKENS,
        )

    # ==================== APPOINTMENTS ====================

    @provide(scope=Scope.REQUEST)
    def get_schedule_viewing_handler(
        self,
        appointment_repository: AppointmentRepository,
        listing_repository: ListingRepository,
    ) -> ScheduleViewingHandler:
        return ScheduleViewingHandler(
            appointment_repository,
            listing_repository,
            tier_limits=self._config.APPOINTMENT_LIMITS,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_appointment_status_handler(
        self, appointment_repository: AppointmentRepository
    ) -> UpdateAppointmentStatusHandler:
        return UpdateAppointmentStatusHandler(appointment_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_appointments_handler(
        self, appointment_repository: AppointmentRepository
    ) -> ListAppointmentsHandler:
        return ListAppointmentsHandler(appointment_repository)


class MemoryStorageProvider(Provider):
    """In-memory repositories over one shared InMemoryDatabase."""

    def __init__(self, config=Config, database: Optional[InMemoryDatabase] = None):
        super().__init__()
        self._config = config
        self._database = database

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        if self._database is not None:
            return self._database
        database = InMemoryDatabase()
        if self._config.SEED_DEMO_LISTINGS:
            database.seed_demo_listings()
        return database

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(
        self, database: InMemoryDatabase
    ) -> ConversationRepository:
        return InMemoryConversationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, database: InMemoryDatabase) -> MessageRepository:
        return InMemoryMessageRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_listing_repository(self, database: InMemoryDatabase) -> ListingRepository:
        return InMemoryListingRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_appointment_repository(
        self, database: InMemoryDatabase
    ) -> AppointmentRepository:
        return InMemoryAppointmentRepository(database)


def create_container(
    config=Config,
    llm_client: Optional[LLMClient] = None,
    database: Optional[InMemoryDatabase] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup (or once per test app).
    """
    if config.STORAGE_BACKEND == "prisma":
        from flatmate.setup.ioc.prisma_provider import PrismaStorageProvider

        storage: Provider = PrismaStorageProvider()
    else:
        storage = MemoryStorageProvider(config, database)
    logger.info(f"Using {config.STORAGE_BACKEND} storage backend")

    return make_async_container(AppProvider(config, llm_client), storage)
