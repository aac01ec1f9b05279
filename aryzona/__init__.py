"""Chat bot building blocks: i18n, dice, chat model, music queues, radios and web content clients."""

__version__ = "0.1.0"