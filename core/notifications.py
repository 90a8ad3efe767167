# core/notifications.py
from django.contrib import messages


class BaseNotifier:
    """User-facing notifications, leveled like django.contrib.messages"""

    def notify(self, level, message):
        raise NotImplementedError

    def success(self, message):
        self.notify(messages.SUCCESS, message)

    def info(self, message):
        self.notify(messages.INFO, message)

    def warning(self, message):
        self.notify(messages.WARNING, message)

    def error(self, message):
        self.notify(messages.ERROR, message)


class MessagesNotifier(BaseNotifier):
    """Queue notifications on the request for the next rendered page"""

    def __init__(self, request):
        self.request = request

    def notify(self, level, message):
        messages.add_message(self.request, level, message)


class MemoryNotifier(BaseNotifier):
    """Keep notifications in a list (non-web callers and tests)"""

    def __init__(self):
        self.notifications = []

    def notify(self, level, message):
        self.notifications.append((level, message))

    @property
    def levels(self):
        return [level for level, _ in self.notifications]

    @property
    def texts(self):
        return [message for _, message in self.notifications]
