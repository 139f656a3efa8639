import logfire

from .version import VERSION
from .env import env


__all__ = (
    'init_logfire',
)


def init_logfire(service: str = 'glasscord') -> None:
    logfire.configure(
        service_name=service + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token or None,
        send_to_logfire='if-token-present',
        environment='development' if env.dev else 'production',
        scrubbing=False if env.dev else None,
        console=None if env.dev else False
    )

    logfire.debug('logfire configured for {service}', service=service)
