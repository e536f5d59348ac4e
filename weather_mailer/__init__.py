"""Weather Mailer - daily laundry & umbrella advice by email."""

__version__ = "0.1.0"
