#!/usr/bin/env python3
"""Create an account, or reset its password, and print a session token.

This is how the first administrator gets in:

    python scripts/create_user.py alice "Alice" alice@example.com --group admin

``--reset-password`` only changes the password of an existing account:

    python scripts/create_user.py alice --reset-password

The password is prompted for unless ``--password`` is given. The printed
token is the value of the ``session`` cookie.
"""

import argparse
import asyncio
import getpass
import sys

import logfire

from quill.config import Settings
from quill.domain.model import User
from quill.domain.service import SessionService, UserService
from quill.domain.value import GroupId, UserId
from quill.util.di.container import create_container
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Quill account")
    parser.add_argument("user_id", help="Username")
    parser.add_argument("name", nargs="?", help="Display name")
    parser.add_argument("email", nargs="?", default="")
    parser.add_argument("--group", default="default")
    parser.add_argument("--password")
    parser.add_argument(
        "--reset-password",
        action="store_true",
        help="Set a new password for an existing account",
    )
    args = parser.parse_args(argv)
    if not args.reset_password and not args.name:
        parser.error("name is required when creating an account")
    return args


async def create_user(args: argparse.Namespace, password: str) -> str:
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            session_service = await request_container.get(SessionService)

            if args.reset_password:
                user_id = UserId(args.user_id)
                await user_service.set_password(user_id, password)
            else:
                user = await user_service.create_user(
                    User(
                        id=UserId(args.user_id),
                        name=args.name,
                        email=args.email,
                        group=GroupId(args.group),
                    ),
                    password,
                )
                user_id = user.id
            session = await session_service.open_session(user_id)
            return session.id
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    password = args.password or getpass.getpass()
    with logfire.span(
        "create_user",
        user_id=args.user_id,
        group=args.group,
        reset_password=args.reset_password,
    ):
        token = asyncio.run(create_user(args, password))

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
