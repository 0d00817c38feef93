import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.agent_template_service import HttpAgentTemplateService
from src.adapter.services.call_service import HttpCallService
from src.adapter.services.client_service import HttpClientService
from src.adapter.services.identity_store import SqlIdentityStore
from src.adapter.services.organization_service import HttpOrganizationService
from src.adapter.services.platform_api import PlatformApi
from src.adapter.services.signup_record_store import SqlSignupRecordStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.calls import PlaceCallUseCase
from src.app.use_cases.signup import (
    SignupDependencies,
    SignupSettings,
    SignupUseCase,
)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    """Create missing tables"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_http_client():
    async with httpx.AsyncClient(
        timeout=ApplicationConfig.OUTBOUND_TIMEOUT_SECONDS
    ) as client:
        yield client


def get_signup_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> SignupUseCase:
    """
    Build the signup use case with its collaborators for one request.

    Identity and record stores share the request's unit of work; the agent
    and provisioning platforms share the request's HTTP client.
    """
    agent_api = PlatformApi(
        http, ApplicationConfig.AGENT_API_BASE_URL, ApplicationConfig.API_KEY
    )
    provisioning_api = PlatformApi(
        http, ApplicationConfig.PROVISIONING_API_BASE_URL, ApplicationConfig.API_KEY
    )

    deps = SignupDependencies(
        identity_store=SqlIdentityStore(
            uow,
            signup_enabled=ApplicationConfig.SIGNUP_ENABLED,
            min_password_length=ApplicationConfig.MIN_PASSWORD_LENGTH,
            bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS,
        ),
        agent_templates=HttpAgentTemplateService(agent_api),
        organizations=HttpOrganizationService(
            provisioning_api, ApplicationConfig.DEFAULT_WIDGET_ID
        ),
        clients=HttpClientService(provisioning_api),
        records=SqlSignupRecordStore(uow),
    )
    settings = SignupSettings(
        template_ids=ApplicationConfig.BUSINESS_TYPE_TEMPLATES,
        default_widget_id=ApplicationConfig.DEFAULT_WIDGET_ID,
        step_timeout_seconds=ApplicationConfig.STEP_TIMEOUT_SECONDS,
    )
    return SignupUseCase(deps, settings)


def get_place_call_use_case(
    http: httpx.AsyncClient = Depends(get_http_client),
) -> PlaceCallUseCase:
    agent_api = PlatformApi(
        http, ApplicationConfig.AGENT_API_BASE_URL, ApplicationConfig.API_KEY
    )
    return PlaceCallUseCase(HttpCallService(agent_api, ApplicationConfig.CALL_AGENT_ID))
