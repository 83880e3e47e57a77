"""CLI commands for online customer accounts."""

from __future__ import annotations

import click

from syos.application.authenticate_user import AuthenticateUserHandler
from syos.application.register_user import RegisterUserHandler
from syos.domain.exceptions import DomainException
from syos.infrastructure.bootstrap import user_repository


@click.command("register")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--address", default="", help="Delivery address.")
@click.password_option()
def user_register(name: str, email: str, address: str, password: str) -> None:
    """Register a new online customer."""
    handler = RegisterUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(name=name, email=email, password=password, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Registered {user.name} <{user.email}> as {user.user_id}")


@click.command("login")
@click.option("--email", required=True, help="Email address.")
@click.option("--password", prompt=True, hide_input=True)
def user_login(email: str, password: str) -> None:
    """Check a customer's credentials."""
    handler = AuthenticateUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome back, {user.name} ({user.user_id})")
