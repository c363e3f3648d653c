"""
The three list views of the admin UI.
"""

from fundgrant.listing.comparators import SortColumn, SortDirection, SortPolicy
from fundgrant.listing.view_model import FacetField, ListViewConfig

ANALYSES_VIEW = ListViewConfig(
    name="analyses",
    title="Analyses",
    endpoint="/api/analyses",
    search_fields=("company.name", "project.name"),
    facets=(
        FacetField(param="status", path="status", label="Status"),
        FacetField(param="company", path="company.name", label="Company"),
        FacetField(param="project", path="project.name", label="Project"),
    ),
    sort_columns={
        "company": SortColumn("company.name", SortPolicy.TEXT, "Company"),
        "project": SortColumn("project.name", SortPolicy.TEXT, "Project"),
        "fundingAmount": SortColumn("project.fundingAmount", SortPolicy.NUMBER, "Funding"),
        "date": SortColumn("date", SortPolicy.DATE, "Date"),
        "status": SortColumn("status", SortPolicy.TEXT, "Status"),
        "questions": SortColumn("questions", SortPolicy.COUNT, "Questions"),
        "completedQuestions": SortColumn("completedQuestions", SortPolicy.NUMBER, "Completed"),
    },
    default_sort="date",
    default_direction=SortDirection.DESC,
    search_placeholder="Search by company or project...",
)

COMPANIES_VIEW = ListViewConfig(
    name="companies",
    title="Companies",
    endpoint="/api/companies",
    search_fields=("name", "industry", "location", "primaryContact.name", "primaryContact.email"),
    facets=(
        FacetField(param="sector", path="sector", label="Sector"),
        FacetField(param="industry", path="industry", label="Industry"),
        FacetField(param="size", path="size", label="Size"),
    ),
    sort_columns={
        "name": SortColumn("name", SortPolicy.TEXT, "Company"),
        "sector": SortColumn("sector", SortPolicy.TEXT, "Sector"),
        "industry": SortColumn("industry", SortPolicy.TEXT, "Industry"),
        "size": SortColumn("size", SortPolicy.TEXT, "Size"),
        "location": SortColumn("location", SortPolicy.TEXT, "Location"),
        "contact": SortColumn("primaryContact.name", SortPolicy.TEXT, "Primary contact"),
    },
    search_placeholder="Search companies...",
)

FUNDING_PROJECTS_VIEW = ListViewConfig(
    name="funding-projects",
    title="Funding Projects",
    endpoint="/api/funding-projects",
    search_fields=("title", "description", "sector"),
    facets=(
        FacetField(param="sector", path="sector", label="Sector"),
    ),
    sort_columns={
        "title": SortColumn("title", SortPolicy.TEXT, "Title"),
        "sector": SortColumn("sector", SortPolicy.TEXT, "Sector"),
        "fundingAmount": SortColumn("fundingAmount", SortPolicy.NUMBER, "Funding"),
        "deadline": SortColumn("deadline", SortPolicy.DATE, "Deadline"),
    },
    default_sort="deadline",
    default_direction=SortDirection.ASC,
    search_placeholder="Search funding projects...",
)
