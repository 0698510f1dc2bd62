"""Repeats whatever follows the command."""


class Echo:
    def execute(self, message, *args, **kwargs):
        return " ".join(args) or message


def create():
    return Echo()
