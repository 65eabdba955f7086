import argparse
import logging
import os
import sys
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from eventmanagement.config import Config, default_config
from eventmanagement.models.event import Event
from eventmanagement.models.event_type import EventType, ProgressType
from eventmanagement.models.money import Money
from eventmanagement.models.orm import Base
from eventmanagement.models.task import Task
from eventmanagement.routes import ROUTES, routes_by_command
from eventmanagement.services.event_service import EventService
from eventmanagement.utils.logging.logging_config import setup_logging
from eventmanagement.utils.logging.metrics import MetricsLogger
from eventmanagement.utils.logging.request_id_filter import (
    RequestIdContextManager,
    RequestIdFilter,
)

logger = logging.getLogger("eventmanagement.main")


def _enum_by_name(enum_cls, value):
    """Accepts enum members, integers, digit strings and case-insensitive member names."""
    if not isinstance(value, str):
        return value
    if value.isdigit():
        return int(value)
    try:
        return enum_cls[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__} '{value}'")


class CreateEventInput(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the event")
    description: str = Field(default="", description="Free-form description")
    type: EventType = Field(default=EventType.DEFAULT, description="Kind of event")
    start: Optional[datetime] = Field(default=None, description="Start in ISO format")
    end: Optional[datetime] = Field(default=None, description="End in ISO format")
    costs: Decimal = Field(default=Decimal("0"))
    budget: Decimal = Field(default=Decimal("0"))
    earnings: Decimal = Field(default=Decimal("0"))
    progress: int = Field(default=0, description="Stored progress value")
    progress_type: ProgressType = Field(default=ProgressType.MANUAL)
    tasks: List[str] = Field(default_factory=list, description="Titles of the tasks to add")

    @field_validator("type", mode="before")
    @classmethod
    def _event_type_by_name(cls, v):
        return _enum_by_name(EventType, v)

    @field_validator("progress_type", mode="before")
    @classmethod
    def _progress_type_by_name(cls, v):
        return _enum_by_name(ProgressType, v)


def build_event(event_input: CreateEventInput) -> Event:
    event = Event(event_input.name)
    event.description = event_input.description
    event.type = event_input.type
    if event_input.start is not None:
        event.start = event_input.start
    if event_input.end is not None:
        event.end = event_input.end
    event.costs = Money(event_input.costs)
    event.budget = Money(event_input.budget)
    event.earnings = Money(event_input.earnings)
    event.progress = event_input.progress
    event.progress_type = event_input.progress_type

    for title in event_input.tasks:
        event.add_task(Task(title=title))

    return event


def format_profile(event: Event) -> str:
    lines = [
        str(event),
        f"Description: {event.description}",
        f"Costs: {event.costs}  Budget: {event.budget}  Earnings: {event.earnings}",
        f"Progress: {event.progress} ({event.progress_type.name}), effective {event.effective_progress()}",
        f"Tasks ({event.count_tasks()}):",
    ]
    for task in event.get_tasks().values():
        lines.append(f"  [{'x' if task.is_done else ' '}] {task.id}: {task.title}")
    lines.append(f"Media ({len(event.get_media())}):")
    for media in event.get_media():
        lines.append(f"  {media.id}: {media.name}")
    return "\n".join(lines)


def list_command(args, session: Session, event_service: EventService, config: Config) -> str:
    count = args.count if args.count is not None else config.newest_limit
    events = event_service.get_newest(session, count)
    if not events:
        return "No events found"
    return "\n".join(str(event) for event in events)


def create_command(args, session: Session, event_service: EventService, config: Config) -> str:
    event_input = CreateEventInput(
        name=args.name,
        description=args.description,
        type=args.type,
        start=args.start,
        end=args.end,
        costs=args.costs,
        budget=args.budget,
        earnings=args.earnings,
        progress=args.progress,
        progress_type=args.progress_type,
        tasks=args.task or [],
    )
    event = build_event(event_input)
    event_id = event_service.create(session, event)
    return f"Event '{event.name}' created with ID {event_id}"


def profile_command(args, session: Session, event_service: EventService, config: Config) -> str:
    event = event_service.get(session, args.event_id)
    if event is None:
        return f"Event {args.event_id} not found"
    return format_profile(event)


COMMANDS: Dict[str, Callable] = {
    "list": list_command,
    "create": create_command,
    "profile": profile_command,
}


def parse_arguments(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Event Management")
    parser.add_argument(
        "-v", action=argparse.BooleanOptionalAction, help="Verbose mode", default=False
    )
    parser.add_argument("--config", help="Path to config.yaml", type=str)

    subparsers = parser.add_subparsers(dest="command", required=True)
    parsers = {
        route.command: subparsers.add_parser(route.command, help=route.description)
        for route in ROUTES
    }

    parsers["list"].add_argument("--count", type=int, help="Number of events to show")

    create = parsers["create"]
    create.add_argument("--name", required=True)
    create.add_argument("--description", default="")
    create.add_argument("--type", default="DEFAULT", help="Event type name, e.g. SEMINAR")
    create.add_argument("--start", help="Start in ISO format")
    create.add_argument("--end", help="End in ISO format")
    create.add_argument("--costs", default="0")
    create.add_argument("--budget", default="0")
    create.add_argument("--earnings", default="0")
    create.add_argument("--progress", type=int, default=0)
    create.add_argument("--progress-type", default="MANUAL", help="Progress type name, e.g. TASKS")
    create.add_argument("--task", action="append", help="Title of a task, repeatable")

    parsers["profile"].add_argument("event_id", type=int)

    return parser.parse_args(argv)


def setup_database(database_url: str):
    """Initialize the database and create necessary directories.

    Returns:
        SQLAlchemy engine instance
    """
    if database_url.startswith("sqlite:///"):
        # Ensure data directory exists
        data_dir = os.path.dirname(database_url.replace("sqlite:///", ""))
        if data_dir and not os.path.exists(data_dir):
            os.makedirs(data_dir)
            logger.info(f"Created data directory at {data_dir}")

    # Create database engine and tables
    engine = create_engine(database_url)
    Base.metadata.create_all(engine)
    logger.info("Database initialized successfully")

    return engine


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    config = default_config(args.config)

    request_id_filter = RequestIdFilter()
    request_id_context_manager = RequestIdContextManager(request_id_filter)
    setup_logging(args.v, request_id_filter, config.logging_dir)
    metrics_logger = MetricsLogger(request_id_filter, logging_dir=config.logging_dir)

    engine = setup_database(config.database_url)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    event_service = EventService(metrics_logger)

    route = routes_by_command()[args.command]
    handler = COMMANDS[args.command]

    try:
        with request_id_context_manager, SessionLocal() as session:
            logger.info(f"Running '{route.command}' (requires {route.permission})")
            output = handler(args, session, event_service, config)
            session.commit()
    except ValidationError as e:
        logger.error(f"Invalid input for '{route.command}': {e}")
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.exception(f"Error running '{route.command}': {e}")
        print("An error occurred: " + str(e), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
