from sqlalchemy import JSON, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hostprofile.database.base import Base, DateTimeMixin


class HardwareReportLog(Base, DateTimeMixin):
    __tablename__ = "hardware_reports"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    session_id: Mapped[str | None] = mapped_column(
        String(128), nullable=True, index=True
    )
    request_ip: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True
    )
    device_name: Mapped[str] = mapped_column(String(64), index=True)
    is_mobile_device: Mapped[bool] = mapped_column(Boolean, default=False)
    is_game_console: Mapped[bool] = mapped_column(Boolean, default=False)
    is_laptop: Mapped[bool] = mapped_column(Boolean, default=False)
    is_virtual_machine: Mapped[bool] = mapped_column(
        Boolean, default=False, index=True
    )
    report: Mapped[dict] = mapped_column(JSON, default=dict)
    snapshot: Mapped[dict] = mapped_column(JSON, default=dict)
