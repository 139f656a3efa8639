from sys import version_info

from aiohttp import __version__ as aiohttp_version


VERSION = '1.0.0'

USER_AGENT = ' '.join([
    f'glasscord (https://github.com/glasscord/glasscord, {VERSION})',
    f'Python/{'.'.join([str(i) for i in version_info[:3]])}',
    f'aiohttp/{aiohttp_version}'
])
