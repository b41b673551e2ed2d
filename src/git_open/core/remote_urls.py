"""Parsing and rewriting of git remote URLs."""


def urls_from_output(output: str) -> set[str]:
    """Extract the unique remote URLs from `git remote --verbose` output.

    Each line looks like `<name> <url> (<direction>)`. Lines with fewer than
    two whitespace-separated fields are skipped.
    """
    urls: set[str] = set()
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        urls.add(fields[1])
    return urls


def format_url(url: str) -> str:
    """Rewrite an SSH-style remote URL into a browsable HTTPS URL.

    `git@github.com:owner/repo.git` becomes `https://github.com/owner/repo.git`.
    Anything that is not of the form `user@host:path` with a non-empty host
    and path is returned unchanged, which leaves HTTP(S) URLs untouched.
    """
    if ":" not in url:
        return url

    user_and_domain, path = url.split(":", 1)
    if "@" not in user_and_domain:
        return url

    domain = user_and_domain.split("@", 1)[1]
    if not domain or not path:
        return url
    return f"https://{domain}/{path}"
