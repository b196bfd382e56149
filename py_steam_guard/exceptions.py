class GuardException(Exception):
    pass


class InvalidSecret(GuardException):
    pass


class KeySetupError(GuardException):
    pass


class CounterError(GuardException):
    pass


class ClockError(Exception):
    pass
