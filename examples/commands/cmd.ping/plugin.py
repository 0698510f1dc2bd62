"""Replies with a localized pong."""

from egile_plugin_loader.plugins import Command


class Ping(Command):
    def execute(self, message, strings, *args, **kwargs):
        return strings.get("reply", "pong")


def create():
    return Ping()
