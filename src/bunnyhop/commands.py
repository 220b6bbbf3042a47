"""URL builders for every bunnyhop command.

Each public function here is a handler: it receives the full query text
(including its own alias) and returns a URL. Handlers are pure and total over
any input, including the empty string. DESCRIPTORS is the one explicit list
that binds handlers to aliases and canonical names.
"""

from bunnyhop.models import CommandDescriptor
from bunnyhop.query import get_command_args
from bunnyhop.stock import STOCK_ALIASES, stock
from bunnyhop.url_encoding import (
    build_path_url,
    build_search_url,
    build_search_url_with_separator,
    encode_url,
)

BINDINGS_URL = "/bindings"
DEVBUNNY_BASE_URL = "http://localhost:8000/"

_ALIASES = {
    "bindings": ("bindings", "commands", "list", "bunny", "cmd", "cmds", "help"),
    "github": ("gh",),
    "gitlab": ("gitlab", "gl"),
    "twitter": ("tw",),
    "reddit": ("r", "reddit"),
    "instagram": ("ig",),
    "facebook": ("fb",),
    "threads": ("threads",),
    "whatsapp": ("wa", "whatsapp"),
    "linkedin": ("li", "linkedin"),
    "meta": ("meta", "metaai"),
    "gmail": ("gmail", "mail"),
    "googledocs": ("docs", "gdoc"),
    "googlesheets": ("gsheets",),
    "googleslides": ("gslides",),
    "googlechat": ("gchat",),
    "googlemaps": ("gmaps", "maps"),
    "google": ("g",),
    "duckduckgo": ("ddg", "duckduckgo"),
    "wikipedia": ("wiki", "wikipedia"),
    "youtube": ("yt", "youtube"),
    "soundcloud": ("sc", "soundcloud"),
    "amazon": ("az", "amzn", "azn", "amazon"),
    "rei": ("rei",),
    "schwab": ("schwab",),
    "stock": STOCK_ALIASES,
    "onepassword": ("1password", "1p", "onepassword"),
    "protonmail": ("pmail",),
    "protondrive": ("pdrive",),
    "claude": ("claude",),
    "chatgpt": ("chatgpt",),
    "cargo": ("cargo", "crates"),
    "npm": ("npm", "npmjs"),
    "pypi": ("pypi", "pip"),
    "rubygems": ("rubygems", "gem", "gems"),
    "packagist": ("packagist", "composer"),
    "nuget": ("nuget",),
    "choco": ("choco", "chocolatey"),
    "brew": ("brew", "homebrew"),
    "dockerhub": ("dockerhub", "docker"),
    "gopkg": ("go", "golang", "gopkg"),
    "godocs": ("godocs",),
    "rust": ("rust",),
    "python": ("python", "pydocs", "py"),
    "node": ("node", "nodejs"),
    "mdn": ("mdn",),
    "stackoverflow": ("stackoverflow", "so"),
    "hack": ("hack",),
    "devbunny": ("devbunny",),
}


def _args(canonical_name: str, full_query: str) -> str:
    return get_command_args(full_query, _ALIASES[canonical_name])


def _search_or_home(home_url: str, search_base: str, param: str, query: str) -> str:
    if not query:
        return home_url
    return build_search_url(search_base, param, query)


# Meta and local tools


def bindings(_args_text: str) -> str:
    return BINDINGS_URL


def facebook(full_query: str) -> str:
    query = _args("facebook", full_query)
    if not query:
        return "https://www.facebook.com"
    if query in ("mp", "buy", "sell"):
        return "https://www.facebook.com/marketplace"
    if " " not in query:
        return build_path_url("https://www.facebook.com", query)
    return build_search_url("https://www.facebook.com/search/top", "q", query)


def instagram(full_query: str) -> str:
    query = _args("instagram", full_query)
    if not query:
        return "https://www.instagram.com"
    if query.startswith("@"):
        return build_path_url("https://www.instagram.com", query[1:])
    return build_search_url("https://www.instagram.com/explore/search/keyword", "q", query)


def threads(full_query: str) -> str:
    query = _args("threads", full_query)
    if not query:
        return "https://www.threads.net"
    if query.startswith("@"):
        username = query[1:]
        if not username:
            return "https://www.threads.net"
        return build_path_url("https://www.threads.net", f"@{username}")
    return build_search_url("https://www.threads.net/search", "q", query)


def whatsapp(_args_text: str) -> str:
    return "https://www.whatsapp.com"


def meta(full_query: str) -> str:
    query = _args("meta", full_query)
    if query in ("accounts", "account"):
        return "https://accountscenter.meta.com"
    if query == "ai":
        return "https://www.meta.ai"
    if query == "pay":
        return "https://accountscenter.meta.com/meta_pay_wallet/?referrer=accounts_center_home"
    if not query and full_query.startswith("metaai"):
        return "https://www.meta.ai"
    return "https://www.meta.com"


def hack(full_query: str) -> str:
    return _search_or_home(
        "https://docs.hhvm.com/hack/",
        "https://docs.hhvm.com/search",
        "term",
        _args("hack", full_query),
    )


def devbunny(full_query: str) -> str:
    return f"{DEVBUNNY_BASE_URL}?cmd={encode_url(_args('devbunny', full_query))}"


# Social and code hosting


def github(full_query: str) -> str:
    """Profiles ("gh @user"), repositories ("gh owner/repo") or repository search."""
    query = _args("github", full_query)
    if not query:
        return "https://github.com"

    if query.startswith("@"):
        username = query[1:]
        if not username:
            return "https://github.com"
        return build_path_url("https://github.com", username)

    author, sep, repo = query.partition("/")
    if sep and author and repo:
        return build_path_url("https://github.com", query)

    return f"{build_search_url('https://github.com/search', 'q', query)}&type=repositories"


def gitlab(full_query: str) -> str:
    query = _args("gitlab", full_query)
    if not query:
        return "https://gitlab.com"
    if "/" in query:
        return build_path_url("https://gitlab.com", query)
    return build_search_url("https://gitlab.com/search", "search", query)


def twitter(full_query: str) -> str:
    query = _args("twitter", full_query)
    if not query:
        return "https://twitter.com"
    if query.startswith("@"):
        username = query[1:]
        if not username:
            return "https://twitter.com"
        return build_path_url("https://twitter.com", username)
    return build_search_url("https://twitter.com/search", "q", query)


def reddit(full_query: str) -> str:
    """Subreddits ("r r/rust"), subreddit search ("r r/rust async") or site search."""
    query = _args("reddit", full_query)
    if not query:
        return "https://reddit.com"

    if query.startswith("r/"):
        subreddit, sep, search_terms = query[2:].partition(" ")
        if sep:
            return build_search_url(
                f"https://reddit.com/r/{subreddit}/search/",
                "q",
                search_terms,
            )
        return f"https://reddit.com/r/{subreddit}"

    return build_search_url("https://www.reddit.com/search/", "q", query)


def linkedin(full_query: str) -> str:
    return _search_or_home(
        "https://www.linkedin.com/",
        "https://www.linkedin.com/search/results/all/",
        "keywords",
        _args("linkedin", full_query),
    )


def stackoverflow(full_query: str) -> str:
    return _search_or_home(
        "https://stackoverflow.com",
        "https://stackoverflow.com/search",
        "q",
        _args("stackoverflow", full_query),
    )


# Google


def google(full_query: str) -> str:
    return build_search_url("https://www.google.com/search", "q", _args("google", full_query))


def gmail(_args_text: str) -> str:
    return "https://mail.google.com"


def googledocs(_args_text: str) -> str:
    return "https://docs.google.com/document/u/0/"


def googlesheets(_args_text: str) -> str:
    return "https://docs.google.com/spreadsheets/u/0/"


def googleslides(_args_text: str) -> str:
    return "https://docs.google.com/presentation/u/0/"


def googlechat(_args_text: str) -> str:
    return "https://chat.google.com/"


def googlemaps(full_query: str) -> str:
    query = _args("googlemaps", full_query)
    if not query:
        return "https://www.google.com/maps"
    return f"https://www.google.com/maps/search/{encode_url(query)}/"


# Search and media


def duckduckgo(full_query: str) -> str:
    return build_search_url("https://duckduckgo.com/", "q", _args("duckduckgo", full_query))


def wikipedia(full_query: str) -> str:
    query = _args("wikipedia", full_query)
    if not query:
        return "https://en.wikipedia.org/"
    return (
        f"https://en.wikipedia.org/w/index.php?search={encode_url(query)}"
        "&title=Special%3ASearch&ns0=1"
    )


def youtube(full_query: str) -> str:
    query = _args("youtube", full_query)
    if not query:
        return "https://youtube.com/"
    if query == "studio":
        return "https://studio.youtube.com/"
    if query in ("subscriptions", "subs"):
        return "https://www.youtube.com/feed/subscriptions"
    return build_search_url("https://www.youtube.com/results", "search_query", query)


def soundcloud(full_query: str) -> str:
    query = _args("soundcloud", full_query)
    if not query:
        return "https://soundcloud.com/discover"
    if query == "likes":
        return "https://soundcloud.com/you/likes"
    return build_search_url("https://soundcloud.com/search", "q", query)


# Shopping and finance


def amazon(full_query: str) -> str:
    return _search_or_home(
        "https://amazon.com/",
        "https://www.amazon.com/s",
        "k",
        _args("amazon", full_query),
    )


def rei(full_query: str) -> str:
    return _search_or_home(
        "https://www.rei.com",
        "https://www.rei.com/search",
        "q",
        _args("rei", full_query),
    )


_SCHWAB_PAGES = {
    "billpay": "https://client.schwab.com/app/accounts/billpay/#/billpay",
    "orders": "https://client.schwab.com/app/trade/orderstatus/#/orderstatus",
    "trade": "https://client.schwab.com/app/trade/tom/trade",
    "transfer": "https://client.schwab.com/app/accounts/transfers_and_payments_overview/#/",
    "transfers": "https://client.schwab.com/app/accounts/transfers_and_payments_overview/#/",
    "payments": "https://client.schwab.com/app/accounts/transfers_and_payments_overview/#/",
    "security": "https://client.schwab.com/app/access/securitysettings",
    "contact": "https://client.schwab.com/app/service/contactus/contactus",
    "contactus": "https://client.schwab.com/app/service/contactus/contactus",
    "call": "https://client.schwab.com/app/service/contactus/contactus",
}


def schwab(full_query: str) -> str:
    return _SCHWAB_PAGES.get(
        _args("schwab", full_query),
        "https://client.schwab.com/app/accounts/summary/",
    )


# Accounts and AI assistants


def onepassword(_args_text: str) -> str:
    return "https://my.1password.com/home"


def protonmail(_args_text: str) -> str:
    return "https://mail.proton.me"


def protondrive(full_query: str) -> str:
    query = _args("protondrive", full_query)
    if not query:
        return "https://drive.proton.me"
    return build_search_url_with_separator("https://drive.proton.me/u/1/search", "q", query, "#")


_CLAUDE_PAGES = {
    "platform": "https://platform.claude.com",
    "api": "https://platform.claude.com/settings/keys",
    "keys": "https://platform.claude.com/settings/keys",
    "apikey": "https://platform.claude.com/settings/keys",
    "billing": "https://claude.ai/settings/billing",
    "cost": "https://claude.ai/settings/billing",
    "artifacts": "https://claude.ai/artifacts",
    "artifacts my": "https://claude.ai/artifacts/my",
    "chats": "https://claude.ai/recents",
    "projects": "https://claude.ai/projects",
    "usage": "https://claude.ai/settings/usage",
    "upgrade": "https://claude.ai/upgrade",
}


def claude(full_query: str) -> str:
    return _CLAUDE_PAGES.get(_args("claude", full_query), "https://claude.ai")


def chatgpt(_args_text: str) -> str:
    return "https://chatgpt.com"


# Package registries and language docs


def cargo(full_query: str) -> str:
    query = _args("cargo", full_query)
    if not query:
        return "https://crates.io"
    if query == "settings":
        return "https://crates.io/settings/profile"
    if query in ("tokens", "api"):
        return "https://crates.io/settings/tokens"
    return build_search_url("https://crates.io/search", "q", query)


def npm(full_query: str) -> str:
    return _search_or_home(
        "https://www.npmjs.com",
        "https://www.npmjs.com/search",
        "q",
        _args("npm", full_query),
    )


def pypi(full_query: str) -> str:
    return _search_or_home(
        "https://pypi.org",
        "https://pypi.org/search/",
        "q",
        _args("pypi", full_query),
    )


def rubygems(full_query: str) -> str:
    return _search_or_home(
        "https://rubygems.org",
        "https://rubygems.org/search",
        "query",
        _args("rubygems", full_query),
    )


def packagist(full_query: str) -> str:
    return _search_or_home(
        "https://packagist.org",
        "https://packagist.org/search/",
        "query",
        _args("packagist", full_query),
    )


def nuget(full_query: str) -> str:
    return _search_or_home(
        "https://www.nuget.org",
        "https://www.nuget.org/packages",
        "q",
        _args("nuget", full_query),
    )


def choco(full_query: str) -> str:
    return _search_or_home(
        "https://community.chocolatey.org",
        "https://community.chocolatey.org/packages",
        "q",
        _args("choco", full_query),
    )


def brew(full_query: str) -> str:
    return _search_or_home(
        "https://formulae.brew.sh",
        "https://formulae.brew.sh/",
        "search",
        _args("brew", full_query),
    )


def dockerhub(full_query: str) -> str:
    return _search_or_home(
        "https://hub.docker.com",
        "https://hub.docker.com/search",
        "q",
        _args("dockerhub", full_query),
    )


_GOPKG_PAGES = {
    "playground": "https://go.dev/play/",
    "play": "https://go.dev/play/",
    "tour": "https://go.dev/tour/",
    "docs": "https://go.dev/doc/",
    "doc": "https://go.dev/doc/",
}


def gopkg(full_query: str) -> str:
    query = _args("gopkg", full_query)
    if not query:
        return "https://pkg.go.dev"
    if query in _GOPKG_PAGES:
        return _GOPKG_PAGES[query]
    return build_search_url("https://pkg.go.dev/search", "q", query)


def godocs(_args_text: str) -> str:
    return "https://go.dev/doc/"


def rust(full_query: str) -> str:
    return _search_or_home(
        "https://doc.rust-lang.org/stable/std/index.html",
        "https://doc.rust-lang.org/stable/std/index.html",
        "search",
        _args("rust", full_query),
    )


_PYTHON_PAGES = {
    "tutorial": "https://docs.python.org/3/tutorial/",
    "library": "https://docs.python.org/3/library/",
    "lib": "https://docs.python.org/3/library/",
    "reference": "https://docs.python.org/3/reference/",
    "ref": "https://docs.python.org/3/reference/",
}


def python(full_query: str) -> str:
    query = _args("python", full_query)
    if not query:
        return "https://docs.python.org/3/"
    if query in _PYTHON_PAGES:
        return _PYTHON_PAGES[query]
    return build_search_url("https://docs.python.org/3/search.html", "q", query)


def node(full_query: str) -> str:
    """Single words open that module's API page; anything else the API index."""
    query = _args("node", full_query)
    if query and " " not in query:
        return f"https://nodejs.org/api/{query}.html"
    return "https://nodejs.org/api/"


def mdn(full_query: str) -> str:
    return _search_or_home(
        "https://developer.mozilla.org",
        "https://developer.mozilla.org/en-US/search",
        "q",
        _args("mdn", full_query),
    )


def _descriptor(
    canonical_name: str,
    handler,
    description: str,
    example: str,
    *,
    takes_config: bool = False,
) -> CommandDescriptor:
    return CommandDescriptor(
        aliases=_ALIASES[canonical_name],
        canonical_name=canonical_name,
        handler=handler,
        description=description,
        example=example,
        takes_config=takes_config,
    )


DESCRIPTORS: tuple[CommandDescriptor, ...] = (
    _descriptor("bindings", bindings, "View all command bindings", "bindings"),
    _descriptor("github", github, "Navigate to GitHub profiles, repositories, or search GitHub", "gh facebook/react"),
    _descriptor("gitlab", gitlab, "Navigate to GitLab projects or search GitLab", "gitlab gitlab-org/gitlab"),
    _descriptor("twitter", twitter, "Navigate to Twitter profiles or search Twitter", "tw @MetaOpenSource"),
    _descriptor("reddit", reddit, "Navigate to Reddit or search subreddits", "r r/rust"),
    _descriptor("instagram", instagram, "Navigate to Instagram profiles or search Instagram", "ig @instagram"),
    _descriptor("facebook", facebook, "Navigate to Facebook pages or search Facebook", "fb Meta"),
    _descriptor("threads", threads, "Navigate to Threads profiles or search Threads", "threads @zuck"),
    _descriptor("whatsapp", whatsapp, "Navigate to WhatsApp", "wa"),
    _descriptor("linkedin", linkedin, "Navigate to LinkedIn or search", "li software engineer"),
    _descriptor("meta", meta, "Navigate to Meta, Meta AI, Meta Accounts Center, or Meta Pay", "meta accounts"),
    _descriptor("gmail", gmail, "Navigate to Gmail", "mail"),
    _descriptor("googledocs", googledocs, "Navigate to Google Docs", "docs"),
    _descriptor("googlesheets", googlesheets, "Navigate to Google Sheets", "gsheets"),
    _descriptor("googleslides", googleslides, "Navigate to Google Slides", "gslides"),
    _descriptor("googlechat", googlechat, "Navigate to Google Chat", "gchat"),
    _descriptor("googlemaps", googlemaps, "Navigate to Google Maps or search for a location", "gmaps san francisco"),
    _descriptor("google", google, "Search Google (also the default for unrecognized commands)", "g rust programming"),
    _descriptor("duckduckgo", duckduckgo, "Search DuckDuckGo", "ddg rust programming"),
    _descriptor("wikipedia", wikipedia, "Search on Wikipedia", "wiki rust programming"),
    _descriptor("youtube", youtube, "Navigate to YouTube or search for videos", "yt rust programming"),
    _descriptor("soundcloud", soundcloud, "Navigate to SoundCloud (supports: likes)", "sc edm"),
    _descriptor("amazon", amazon, "Navigate to Amazon or search for products", "az headphones"),
    _descriptor("rei", rei, "Navigate to REI or search for outdoor gear", "rei hiking boots"),
    _descriptor(
        "schwab",
        schwab,
        "Charles Schwab shortcuts (billpay, orders, trade, transfer, security, contact)",
        "schwab billpay",
    ),
    _descriptor(
        "stock",
        stock,
        "Look up stock prices on Yahoo Finance, Finviz, TradingView, Google Finance, or Investing.com",
        "stock META  or  stock finviz META  or  $META",
        takes_config=True,
    ),
    _descriptor("onepassword", onepassword, "1Password home page", "1p"),
    _descriptor("protonmail", protonmail, "Navigate to Protonmail", "pmail"),
    _descriptor("protondrive", protondrive, "Navigate to ProtonDrive or search for files", "pdrive taxes"),
    _descriptor(
        "claude",
        claude,
        "Navigate to Claude AI (supports: billing, cost, artifacts, chats, projects)",
        "claude projects",
    ),
    _descriptor("chatgpt", chatgpt, "Navigate to ChatGPT", "chatgpt"),
    _descriptor("cargo", cargo, "Navigate to crates.io or search for Rust crates", "cargo serde"),
    _descriptor("npm", npm, "Navigate to npmjs.com or search for npm packages", "npm react"),
    _descriptor("pypi", pypi, "Navigate to pypi.org or search for Python packages", "pypi requests"),
    _descriptor("rubygems", rubygems, "Navigate to rubygems.org or search for Ruby gems", "gem rails"),
    _descriptor("packagist", packagist, "Navigate to packagist.org or search for PHP packages", "packagist symfony"),
    _descriptor("nuget", nuget, "Navigate to nuget.org or search for .NET packages", "nuget newtonsoft"),
    _descriptor("choco", choco, "Navigate to community.chocolatey.org or search for Windows packages", "choco git"),
    _descriptor("brew", brew, "Navigate to formulae.brew.sh or search for Homebrew packages", "brew wget"),
    _descriptor("dockerhub", dockerhub, "Navigate to Docker Hub or search for container images", "docker nginx"),
    _descriptor("gopkg", gopkg, "Navigate to pkg.go.dev or search for Go packages", "go http"),
    _descriptor("godocs", godocs, "Navigate to Go language documentation", "godocs"),
    _descriptor("rust", rust, "Navigate to Rust documentation or search Rust std docs", "rust HashMap"),
    _descriptor("python", python, "Navigate to Python documentation or search for Python resources", "py asyncio"),
    _descriptor("node", node, "Navigate to Node.js API documentation or specific module docs", "node fs"),
    _descriptor("mdn", mdn, "Navigate to MDN Web Docs or search for web development resources", "mdn flexbox"),
    _descriptor(
        "stackoverflow",
        stackoverflow,
        "Navigate to Stack Overflow or search for programming questions",
        "so rust lifetimes",
    ),
    _descriptor("hack", hack, "Navigate to Hack documentation or search Hack docs", "hack async"),
    _descriptor("devbunny", devbunny, "Test commands against a local development server", "devbunny gh facebook"),
)
