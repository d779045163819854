from os import getenv


# env vars could be true or 1, or anything else -- here's a centralized location to
# handle that
def env_vars(env_var: str, default: str) -> bool:
    var = getenv(env_var, default).lower()
    return var == "true" or var == "1"


def is_url(source: str) -> bool:
    """True for sources that need to be fetched over HTTP(S)"""
    return source.startswith(("http://", "https://"))


def is_gzipped(source: str) -> bool:
    """Debian mirrors publish Packages.gz, so we look at the extension"""
    return source.endswith(".gz")
