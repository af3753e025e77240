"""
URL-based heuristics for job postings.

Derives a best-guess company name and job title from the path conventions
of the big job boards. Used as a last resort when the rendered page yields
nothing usable, and as a backstop when it yields placeholders.
"""
import re
import logging
from typing import Optional
from urllib.parse import urlparse, unquote

logger = logging.getLogger(__name__)

COMPANY_PLACEHOLDER = "Company"
JOB_TITLE_PLACEHOLDER = "Job Title"

UNKNOWN_COMPANY = "Unknown Company"
UNTITLED_POSITION = "Untitled Position"

# "<title>-at-<company>" slugs; "at-" must start a word
COMPANY_PATTERNS = {
    'linkedin.com': re.compile(r'/jobs/.*?(?<![A-Za-z0-9])at-([^/?#]+)', re.I),
    'indeed.com': re.compile(r'/.*?(?<![A-Za-z0-9])at-([^/?#]+)', re.I),
    'glassdoor.com': re.compile(r'/.*?(?<![A-Za-z0-9])at-([^/?#]+)', re.I),
}

TITLE_PATTERNS = {
    'linkedin.com': re.compile(r'/jobs/view/([^/?#]+)', re.I),
    'indeed.com': re.compile(r'/.*?(?<![A-Za-z0-9])job-([^/?#]+)', re.I),
}

# LinkedIn appends the numeric posting id to every slug
TRAILING_ID_RE = re.compile(r'(?:^|-)\d{5,}$')
EXTENSION_RE = re.compile(r'\.(?:html?|aspx?|php)$', re.I)
AT_COMPANY_RE = re.compile(r'-at-.*$', re.I)
# Glassdoor listing tokens: JV_IC1147401_KO0,17
LISTING_TOKEN_RE = re.compile(r'(?:^|-)(?:JV_|KO\d)[\w,]*$')

# Path segments that never describe a position
GENERIC_SEGMENTS = {
    'job', 'jobs', 'career', 'careers', 'view', 'viewjob', 'apply', 'position',
    'positions', 'opening', 'openings', 'vacancy', 'vacancies', 'posting',
    'postings', 'details', 'detail', 'en', 'en-us', 'en-gb', 'us', 'search',
    'index', 'index.html', 'home', 'job-listing', 'job-listings',
}

# Boards host many employers, so their host name is never the company
JOB_BOARD_HOSTS = ('linkedin.com', 'indeed.com', 'glassdoor.com', 'monster.com')

# Second-level labels that sit under a country code (acme.co.uk)
SECOND_LEVEL_SUFFIXES = {'co', 'com', 'org', 'net', 'ac', 'gov', 'edu'}


def get_host(url: Optional[str]) -> str:
    """Return the lowercased host of a URL, tolerating a missing scheme."""
    if not url:
        return ""
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
        if not parsed.netloc and not parsed.scheme:
            parsed = urlparse(f"//{candidate}")
        elif not parsed.netloc and "." in parsed.scheme:
            # "linkedin.com:443/jobs" parses as scheme="linkedin.com"
            parsed = urlparse(f"//{candidate}")
        return (parsed.hostname or "").lower()
    except ValueError:
        return ""


def _get_path(url: str) -> str:
    host = get_host(url)
    if not host:
        return ""
    try:
        parsed = urlparse(url.strip())
        if parsed.hostname and parsed.hostname.lower() == host:
            return parsed.path
        return urlparse(f"//{url.strip()}").path
    except ValueError:
        return ""


def _match_host(host: str, patterns: dict) -> Optional[re.Pattern]:
    for domain, pattern in patterns.items():
        if domain in host:
            return pattern
    return None


def humanize_slug(slug: str) -> str:
    """
    Turn a URL slug into words: hyphens and underscores become spaces and
    the first letter of every word is upper-cased. The rest of each word is
    left as-is so "iOS" stays "IOS" rather than "Ios".
    """
    text = unquote(slug).replace('-', ' ').replace('_', ' ').replace('+', ' ')
    text = re.sub(r'\s+', ' ', text).strip()
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), text)


def _clean_slug(slug: str) -> str:
    slug = EXTENSION_RE.sub('', slug.strip('-'))
    slug = LISTING_TOKEN_RE.sub('', slug)
    slug = TRAILING_ID_RE.sub('', slug)
    return slug.strip('-')


def company_from_url(url: str) -> str:
    """
    Derive the company from an "...-at-<company>" path segment.

    Only LinkedIn, Indeed and Glassdoor follow this convention; anything
    else returns the "Company" placeholder.
    """
    if not url:
        return COMPANY_PLACEHOLDER
    pattern = _match_host(get_host(url), COMPANY_PATTERNS)
    if not pattern:
        return COMPANY_PLACEHOLDER

    match = pattern.search(_get_path(url))
    if not match:
        return COMPANY_PLACEHOLDER

    company = humanize_slug(_clean_slug(match.group(1)))
    return company or COMPANY_PLACEHOLDER


def job_title_from_url(url: str) -> str:
    """
    Derive the job title from LinkedIn "jobs/view/<slug>" or Indeed
    "job-<slug>" paths. Returns the "Job Title" placeholder otherwise.
    """
    if not url:
        return JOB_TITLE_PLACEHOLDER
    pattern = _match_host(get_host(url), TITLE_PATTERNS)
    if not pattern:
        return JOB_TITLE_PLACEHOLDER

    match = pattern.search(_get_path(url))
    if not match:
        return JOB_TITLE_PLACEHOLDER

    slug = AT_COMPANY_RE.sub('', _clean_slug(match.group(1)))
    title = humanize_slug(_clean_slug(slug))
    return title or JOB_TITLE_PLACEHOLDER


def is_job_board(url: str) -> bool:
    host = get_host(url)
    return any(board in host for board in JOB_BOARD_HOSTS)


def _is_listing_id(slug: str) -> bool:
    """Mostly digits and punctuation, e.g. "12345_678" or "IC1147401_KO0,17"."""
    body = slug.replace('-', '')
    letters = sum(1 for c in body if c.isalpha())
    return letters * 2 < len(body)


def company_from_host(url: str) -> str:
    """
    Best guess at the employer from the host name (careers.acme.com -> Acme).

    Job boards list other companies' postings, so their hosts give
    "Unknown Company" instead of the board's own name.
    """
    if is_job_board(url):
        return UNKNOWN_COMPANY
    host = get_host(url)
    if host.startswith('www.'):
        host = host[4:]
    labels = [label for label in host.split('.') if label]
    if len(labels) < 2:
        name = labels[0] if labels else ""
    elif len(labels) >= 3 and labels[-2] in SECOND_LEVEL_SUFFIXES and len(labels[-1]) == 2:
        name = labels[-3]
    else:
        name = labels[-2]

    company = humanize_slug(name)
    return company or UNKNOWN_COMPANY


def job_title_from_path(url: str) -> str:
    """Best guess at the title from the last descriptive path segment."""
    segments = [s for s in _get_path(url).split('/') if s]
    for segment in reversed(segments):
        slug = _clean_slug(segment)
        if not slug or slug.lower() in GENERIC_SEGMENTS or _is_listing_id(slug):
            continue
        title = humanize_slug(AT_COMPANY_RE.sub('', slug))
        if title:
            return title
    return UNTITLED_POSITION


def is_placeholder(value: Optional[str], placeholder: str) -> bool:
    """True when a field is empty or still holds its seed placeholder."""
    return not value or not value.strip() or value.strip() == placeholder
