import io
import os
import tempfile
import zipfile

# Keep uploads out of the working tree; must be set before config is imported
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="resume-uploads-"))
os.environ.setdefault("ANALYZER_BACKEND", "heuristic")

import pytest

from services.ats_scorer import ATSScorer

REFERENCE_YEAR = 2024

STRONG_RESUME = """Jane Smith
jane.smith@email.com | 555-123-4567 | linkedin.com/in/janesmith

Summary
Senior software engineer with 9 years of experience building cloud platforms for 40 clients.

Experience
Senior Software Engineer, Acme Corp (2019 - 2024)
• Led a team of 6 engineers delivering microservices on AWS with agile and scrum
• Reduced infrastructure costs by 30% saving $120000 per year
• Designed and implemented a CI/CD pipeline used by 12 projects
Software Developer, Beta Inc (2015 - 2019)
• Developed REST API services in Python and SQL for 3 million customers
• Improved database query performance by 45% through automation and testing
• Coordinated releases with stakeholder groups across 4 time zones

Education
Bachelor of Science in Computer Science, State University (2011 - 2015)

Skills
Python, Java, SQL, Docker, Kubernetes, React, Leadership, Communication, Teamwork

Projects
Open source contributor to a cloud deployment toolkit

Certifications
AWS Certified Solutions Architect

Awards
Engineering excellence award, recognized for mentoring junior developers
"""

DOCX_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def make_docx(paragraphs):
    """Build a minimal .docx (just word/document.xml) in memory."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{text}</w:t></w:r></w:p>'
        for text in paragraphs
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{DOCX_NAMESPACE}"><w:body>{body}</w:body></w:document>'
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("word/document.xml", document)
    return buffer.getvalue()


@pytest.fixture
def scorer():
    return ATSScorer(current_year=REFERENCE_YEAR)


@pytest.fixture
def strong_resume():
    return STRONG_RESUME
