"""
Unit tests for site extraction plugins.
"""
import pytest

from core.document import parse
from crawler.plugins.base import SiteSelectors, collect_requirements
from crawler.plugins.generic import GenericPlugin, MIN_BLOCK_LENGTH, MAX_BLOCK_LENGTH
from crawler.plugins.glassdoor import GlassdoorPlugin
from crawler.plugins.indeed import IndeedPlugin
from crawler.plugins.linkedin import LinkedInPlugin
from crawler.plugins.monster import MonsterPlugin

LINKEDIN_URL = "https://www.linkedin.com/jobs/view/senior-backend-engineer-at-acme-corp-3712345678"


class TestLinkedInPlugin:
    def test_extracts_fixture(self, load_fixture):
        doc = parse(load_fixture('linkedin_job.html'))
        candidate = LinkedInPlugin().extract(doc, LINKEDIN_URL)

        assert candidate.job_title == "Senior Backend Engineer"
        assert candidate.company_name == "Acme Corp"
        assert candidate.location == "San Francisco, CA"
        assert candidate.salary == "$150,000 - $190,000/yr"

    def test_description_concatenates_blocks(self, load_fixture):
        doc = parse(load_fixture('linkedin_job.html'))
        description = LinkedInPlugin().extract(doc, LINKEDIN_URL).job_description

        assert description.startswith("Acme Corp is hiring a backend engineer")
        assert "\n" in description
        assert "Free lunch on Fridays" in description
        assert description == description.strip()

    def test_requirements_first_five_in_order(self, load_fixture):
        doc = parse(load_fixture('linkedin_job.html'))
        requirements = LinkedInPlugin().extract(doc, LINKEDIN_URL).requirements

        assert requirements == [
            "Requirement: 5+ years of Python",
            "Qualification: BS in Computer Science or equivalent",
            "Experience with PostgreSQL",
            "Experience with Kubernetes",
            "Requirement: strong written communication",
        ]

    def test_data_attribute_preferred_over_class_match(self):
        html = """
        <h1 class="main-title">Generic Heading</h1>
        <h1 data-test-id="job-details-jobs-unified-top-card__job-title">Data Engineer</h1>
        """
        candidate = LinkedInPlugin().extract(parse(html), LINKEDIN_URL)
        assert candidate.job_title == "Data Engineer"

    def test_missing_fields_are_empty(self):
        candidate = LinkedInPlugin().extract(parse("<html><body></body></html>"), LINKEDIN_URL)
        assert candidate.job_title == ""
        assert candidate.company_name == ""
        assert candidate.job_description == ""
        assert candidate.requirements == []


def test_requirements_keep_duplicates():
    html = "<ul>" + "<li>Experience with Go</li>" * 3 + "</ul>"
    assert collect_requirements(parse(html)) == ["Experience with Go"] * 3


def test_only_linkedin_collects_requirements():
    html = "<ul><li>Requirement: Java</li></ul><h1 class='title'>Dev</h1>"
    for plugin in (IndeedPlugin(), GlassdoorPlugin(), MonsterPlugin(), GenericPlugin()):
        assert plugin.extract(parse(html), "https://example.com").requirements == []


class TestSitePlugins:
    def test_indeed(self):
        html = """
        <h1 data-testid="jobsearch-JobInfoHeader-title">Python Developer</h1>
        <div data-testid="inlineHeader-companyName">Globex</div>
        <div data-testid="inlineHeader-companyLocation">Austin, TX</div>
        <div id="jobDescriptionText">Build data pipelines.</div>
        """
        candidate = IndeedPlugin().extract(parse(html), "https://www.indeed.com/viewjob?jk=abc")
        assert candidate.job_title == "Python Developer"
        assert candidate.company_name == "Globex"
        assert candidate.location == "Austin, TX"
        assert candidate.job_description == "Build data pipelines."

    def test_glassdoor(self):
        html = """
        <div data-test="job-title">Data Analyst</div>
        <div data-test="employer-name">Initech</div>
        <div data-test="location">Remote</div>
        <div data-test="detailSalary">$90K - $110K</div>
        <div class="jobDescriptionContent">Analyse TPS reports.</div>
        """
        candidate = GlassdoorPlugin().extract(parse(html), "https://www.glassdoor.com/job-listing/x")
        assert candidate.job_title == "Data Analyst"
        assert candidate.company_name == "Initech"
        assert candidate.salary == "$90K - $110K"
        assert candidate.job_description == "Analyse TPS reports."

    def test_monster(self):
        html = """
        <h1 class="job-title-header">Warehouse Lead</h1>
        <span class="company-name">Umbrella</span>
        <span class="job-location">Raccoon City</span>
        <div class="job-description">Lead a team of 12.</div>
        """
        candidate = MonsterPlugin().extract(parse(html), "https://www.monster.com/job-openings/x")
        assert candidate.job_title == "Warehouse Lead"
        assert candidate.company_name == "Umbrella"
        assert candidate.location == "Raccoon City"
        assert candidate.job_description == "Lead a team of 12."

    @pytest.mark.parametrize("plugin_cls, url, expected", [
        (LinkedInPlugin, "https://www.linkedin.com/jobs/view/1", True),
        (LinkedInPlugin, "https://uk.LINKEDIN.com/jobs/view/1", True),
        (LinkedInPlugin, "https://example.com/?ref=linkedin.com", False),
        (IndeedPlugin, "https://ca.indeed.com/viewjob", True),
        (GlassdoorPlugin, "https://www.glassdoor.com/job", True),
        (MonsterPlugin, "https://www.monster.com/job", True),
        (MonsterPlugin, "https://www.indeed.com/job", False),
    ])
    def test_can_handle_matches_host(self, plugin_cls, url, expected):
        assert plugin_cls().can_handle(url) is expected


class TestGenericPlugin:
    def _paragraph(self, length: int) -> str:
        return "x" * length

    def test_description_length_window(self):
        short = self._paragraph(99)
        kept = self._paragraph(150)
        too_long = self._paragraph(5001)
        html = f"<body><p>{short}</p><p>{kept}</p><p>{too_long}</p></body>"

        description = GenericPlugin().extract(parse(html), "https://example.com").job_description
        assert description == kept

    def test_bounds_are_exclusive(self):
        html = (
            f"<body><p>{self._paragraph(MIN_BLOCK_LENGTH)}</p>"
            f"<p>{self._paragraph(MAX_BLOCK_LENGTH)}</p></body>"
        )
        assert GenericPlugin().extract(parse(html), "https://example.com").job_description == ""

    def test_fixture(self, load_fixture):
        candidate = GenericPlugin().extract(
            parse(load_fixture('generic_job.html')), "https://careers.globex.com/openings/platform-engineer"
        )
        assert candidate.job_title == "Platform Engineer"
        assert candidate.company_name == "Globex Corporation"
        assert candidate.location == "Remote (US)"
        lines = candidate.job_description.split("\n")
        assert len(lines) == 2
        assert lines[0].startswith("Globex is looking for a platform engineer")
        assert lines[1].startswith("You will work closely")
        assert "Apply now" not in candidate.job_description

    def test_nested_blocks_counted_separately(self):
        text = self._paragraph(120)
        html = f"<body><div><p>{text}</p></div></body>"
        description = GenericPlugin().extract(parse(html), "https://example.com").job_description
        assert description == f"{text}\n{text}"

    def test_handles_any_url(self):
        assert GenericPlugin().can_handle("https://anything.example")


def test_explicit_selectors_replace_defaults():
    selectors = SiteSelectors(title=['.custom-title'], description=['.body'])
    plugin = MonsterPlugin(selectors=selectors)
    candidate = plugin.extract(
        parse("<h1 class='job-title'>Ignored</h1><div class='custom-title'>Used</div>"),
        "https://www.monster.com/job"
    )
    assert candidate.job_title == "Used"


def test_with_overrides_only_touches_named_fields():
    base = SiteSelectors(title=['h1'], company=['.co'])
    merged = base.with_overrides({'title': ['h2']})
    assert merged.title == ['h2']
    assert merged.company == ['.co']
    assert base.title == ['h1']
