from __future__ import annotations

import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .auth.otp import HttpSmsGateway, MockOtpProvider, OtpProvider, SmsOtpProvider
from .auth.service import AuthService
from .auth.tokens import SessionTokens
from .core.constants import OTP_SWEEP_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .labours.mysql_labour_repository import MySQLLabourRepository
from .labours.repository import LabourRepository
from .labours.service import LabourService
from .payments.mysql_payment_repository import MySQLPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.service import BalanceService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService
from .work_days.mysql_work_day_repository import MySQLWorkDayRepository
from .work_days.repository import WorkDayRepository
from .work_days.service import WorkDayService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    projects_repo: ProjectRepository
    labours_repo: LabourRepository
    work_days_repo: WorkDayRepository
    payments_repo: PaymentRepository

    otp_provider: OtpProvider

    auth_service: AuthService
    user_service: UserService
    project_service: ProjectService
    labour_service: LabourService
    work_day_service: WorkDayService
    balance_service: BalanceService
    payment_service: PaymentService

    def close(self) -> None:
        self.otp_provider.close()


def wire_services(
    *,
    users_repo: UserRepository,
    projects_repo: ProjectRepository,
    labours_repo: LabourRepository,
    work_days_repo: WorkDayRepository,
    payments_repo: PaymentRepository,
    otp_provider: OtpProvider,
    tokens: SessionTokens,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    balance_service = BalanceService(labours_repo, work_days_repo, payments_repo)
    return Container(
        conn=conn,
        users_repo=users_repo,
        projects_repo=projects_repo,
        labours_repo=labours_repo,
        work_days_repo=work_days_repo,
        payments_repo=payments_repo,
        otp_provider=otp_provider,
        auth_service=AuthService(users_repo, otp_provider, tokens),
        user_service=UserService(users_repo),
        project_service=ProjectService(projects_repo, labours_repo),
        labour_service=LabourService(labours_repo),
        work_day_service=WorkDayService(work_days_repo, labours_repo),
        balance_service=balance_service,
        payment_service=PaymentService(payments_repo, labours_repo, balance_service),
    )


def build_otp_provider(settings: ModuleType) -> OtpProvider:
    kind = str(getattr(settings, "OTP_PROVIDER", "mock")).lower()
    sweep_seconds = float(getattr(settings, "OTP_SWEEP_SECONDS", OTP_SWEEP_SECONDS))

    if kind == "sms":
        gateway = HttpSmsGateway(
            getattr(settings, "SMS_GATEWAY_URL", ""),
            token=getattr(settings, "SMS_GATEWAY_TOKEN", ""),
        )
        return SmsOtpProvider(gateway, sweep_seconds=sweep_seconds)
    if kind != "mock":
        raise ValueError(f"unknown OTP_PROVIDER: {kind!r}")

    logger.warning("using mock OTP provider, codes are logged instead of sent")
    return MockOtpProvider(
        use_fixed_code=bool(getattr(settings, "OTP_FIXED_CODE", False)),
        sweep_seconds=sweep_seconds,
    )


def build_container(*, db_config: dict, settings: ModuleType) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        labours_repo=MySQLLabourRepository(conn),
        work_days_repo=MySQLWorkDayRepository(conn),
        payments_repo=MySQLPaymentRepository(conn),
        otp_provider=build_otp_provider(settings),
        tokens=SessionTokens(getattr(settings, "JWT_SECRET")),
        conn=conn,
    )
