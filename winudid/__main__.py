import sys
from .utils import async_test
from .resolver import UDIDResolver

"""
python -m winudid [-v]

Prints the machine ID. With -v the tier it came from is
printed on a second line.
"""
async def main(argv):
    resolver = UDIDResolver.for_platform()
    udid = await resolver.resolve()
    print(udid)
    if "-v" in argv:
        print(resolver.tier)

    return udid

def cli():
    async_test(main, [sys.argv[1:]])

if __name__ == "__main__":
    cli()
