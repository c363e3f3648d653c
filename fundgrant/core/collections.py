"""
Named collections of the document store.
"""


class Collections:
    """Collection names, kept identical to the legacy document database."""
    ANALYSES = "analysis-data"
    ANALYSIS_QUESTIONS = "analysis-questions"
    AGENTS = "agents"
    COMPANIES = "companies"
    DOCUMENT_SECTIONS = "document-sections"
    FUNDING_PROJECTS = "funding-projects"
    PROJECTS = "projects"
    REFERENCE_DOCUMENTS = "referenceDocuments"
    TEAM_MEMBERS = "team-members"

    ALL = [
        ANALYSES,
        ANALYSIS_QUESTIONS,
        AGENTS,
        COMPANIES,
        DOCUMENT_SECTIONS,
        FUNDING_PROJECTS,
        PROJECTS,
        REFERENCE_DOCUMENTS,
        TEAM_MEMBERS,
    ]
