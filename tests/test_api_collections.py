"""CRUD endpoints for the document collections."""

import uuid

import pytest

from fundgrant.core.collections import Collections
from fundgrant.repositories.document_repository import DocumentRepository
from fundgrant.seed_data import load_fixture
from fundgrant.services.company_service import CompanyService

pytestmark = [pytest.mark.db, pytest.mark.asyncio]


async def test_company_crud_round(client):
    created = await client.post("/api/companies", json={"name": "EcoTech Solutions", "sector": "Clean Energy", "id": "ignored"})
    assert created.status_code == 201
    company = created.json()
    assert company["id"] != "ignored"
    assert "createdAt" in company and "updatedAt" in company

    listed = await client.get("/api/companies")
    assert [item["id"] for item in listed.json()] == [company["id"]]

    updated = await client.put(f"/api/companies/{company['id']}", json={"size": "Medium", "_id": "x"})
    assert updated.status_code == 200
    assert updated.json()["size"] == "Medium"
    assert updated.json()["name"] == "EcoTech Solutions"

    deleted = await client.delete(f"/api/companies/{company['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Company deleted successfully"}

    missing = await client.get(f"/api/companies/{company['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Company not found"}


async def test_required_fields_are_reported(client):
    response = await client.post("/api/companies", json={"sector": "Healthcare"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}


async def test_companies_resolve_by_native_or_legacy_id(client, seed):
    await seed(CompanyService, load_fixture("companies"))

    by_legacy = await client.get("/api/companies/comp-1")
    assert by_legacy.status_code == 200
    company = by_legacy.json()
    assert company["name"] == "EcoTech Solutions"
    assert company["externalId"] == "comp-1"

    by_native = await client.get(f"/api/companies/{company['id']}")
    assert by_native.json()["name"] == "EcoTech Solutions"

    assert (await client.get("/api/companies/comp-404")).status_code == 404


@pytest.mark.parametrize(
    "path, message",
    [
        ("/api/analyses/not-an-id", "Invalid analysis ID format"),
        ("/api/agents/agent-1", "Invalid agent ID format"),
        ("/api/team-members/user-1", "Invalid team member ID format"),
        ("/api/document-sections/123", "Invalid document section ID format"),
        ("/api/documents/doc-1", "Invalid document ID format"),
    ],
)
async def test_malformed_ids_are_rejected_on_strict_collections(client, path, message):
    for method in ("GET", "PUT", "DELETE"):
        response = await client.request(method, path, json={} if method == "PUT" else None)
        assert response.status_code == 400
        assert response.json() == {"error": message}


async def test_reference_document_crud_round(client):
    created = await client.post("/api/documents", json={"title": "Horizon Europe guidelines", "type": "PDF", "_id": "x"})
    assert created.status_code == 201
    document = created.json()
    assert document["status"] == "active"
    assert document["uploadDate"] == document["lastModified"]
    assert "_id" not in document

    kept = await client.post(
        "/api/documents",
        json={"title": "Budget template", "status": "archived", "uploadDate": "2024-03-01T00:00:00Z"},
    )
    assert kept.json()["status"] == "archived"
    assert kept.json()["uploadDate"] == "2024-03-01T00:00:00Z"

    listed = await client.get("/api/documents")
    assert [item["title"] for item in listed.json()] == ["Horizon Europe guidelines", "Budget template"]

    updated = await client.put(f"/api/documents/{document['id']}", json={"status": "archived"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "archived"
    assert updated.json()["uploadDate"] == document["uploadDate"]
    assert updated.json()["lastModified"] >= document["lastModified"]

    deleted = await client.delete(f"/api/documents/{document['id']}")
    assert deleted.json() == {"message": "Document deleted successfully"}
    assert (await client.get(f"/api/documents/{document['id']}")).status_code == 404

    missing_title = await client.post("/api/documents", json={"type": "PDF"})
    assert missing_title.status_code == 400
    assert missing_title.json() == {"error": "Title is required"}


async def test_unknown_native_id_is_not_found(client):
    response = await client.get(f"/api/analyses/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"error": "Analysis not found"}


async def test_create_analysis_registers_company_and_project(client):
    payload = {
        "company": {"name": "EcoTech Solutions", "sector": "Clean Energy"},
        "project": {"name": "EU Green Innovation Fund", "fundingAmount": 750000},
        "answers": [
            {"questionId": "q1", "question": "What problem do you solve?", "answer": "Energy storage"},
            {"questionId": "q2", "question": "Who are your customers?", "answer": "   "},
        ],
    }

    created = await client.post("/api/analyses", json=payload)
    assert created.status_code == 201
    analysis = created.json()
    assert analysis["status"] == "Pending"
    assert analysis["completedQuestions"] == 1
    assert [q["category"] for q in analysis["questions"]] == ["General", "General"]
    assert analysis["createdAt"] == analysis["lastUpdated"]

    again = await client.post("/api/analyses", json=payload)
    assert again.status_code == 201

    companies = (await client.get("/api/companies")).json()
    assert [company["name"] for company in companies] == ["EcoTech Solutions"]
    projects = (await client.get("/api/funding-projects")).json()
    assert len(projects) == 1
    assert projects[0]["companyId"] == companies[0]["id"]
    assert projects[0]["status"] == "Active"


async def test_analysis_requires_company_and_rejects_unknown_status(client):
    missing = await client.post("/api/analyses", json={"project": {"name": "Fund"}})
    assert missing.status_code == 400
    assert "company" in missing.json()["error"]

    created = await client.post("/api/analyses", json={"company": {"name": "A"}, "project": {"name": "B"}})
    analysis_id = created.json()["id"]
    bad = await client.put(f"/api/analyses/{analysis_id}", json={"status": "Archived"})
    assert bad.status_code == 400

    good = await client.put(f"/api/analyses/{analysis_id}", json={"status": "Completed"})
    assert good.json()["status"] == "Completed"
    assert good.json()["lastUpdated"] >= created.json()["lastUpdated"]


async def test_document_sections_order_and_defaults(client):
    missing = await client.post("/api/document-sections", json={"title": "Executive Summary"})
    assert missing.status_code == 400
    assert missing.json() == {"error": "Title and category are required"}

    first = (await client.post("/api/document-sections", json={"title": "Summary", "category": "Overview"})).json()
    second = (await client.post("/api/document-sections", json={"title": "Budget", "category": "Financial"})).json()

    assert first["order"] == 1
    assert second["order"] == 2
    assert first["isRequired"] is False
    assert first["associatedProjects"] == []


@pytest.mark.parametrize("path, expected", [("/api/document-sections/seed", 9), ("/api/agents/seed", 5)])
async def test_seed_is_idempotent(client, path, expected):
    first = await client.post(path)
    assert first.status_code == 201
    assert first.json()["count"] == expected
    assert len(first.json()["ids"]) == expected

    second = await client.post(path)
    assert second.status_code == 200
    assert second.json()["count"] == expected
    assert "No seeding needed" in second.json()["message"]
    assert "ids" not in second.json()


async def test_agents_require_profile_fields(client):
    response = await client.post("/api/agents", json={"name": "Technical Expert"})
    assert response.status_code == 400
    assert response.json() == {"error": "Name, tone and specialization are required"}

    created = await client.post(
        "/api/agents",
        json={"name": "Technical Expert", "tone": "Precise", "specialization": "Engineering"},
    )
    assert created.status_code == 201
    assert created.json()["isRecommended"] is False


async def test_team_members_validate_role(client):
    bad_role = await client.post(
        "/api/team-members",
        json={"name": "John Doe", "email": "john.doe@fundgrant.com", "role": "Owner"},
    )
    assert bad_role.status_code == 400

    created = await client.post(
        "/api/team-members",
        json={"name": "John Doe", "email": "john.doe@fundgrant.com", "role": "Team Member"},
    )
    assert created.status_code == 201
    member = created.json()
    assert member["assignedCompanies"] == []
    assert member["activeProjects"] == 0

    update = await client.put(f"/api/team-members/{member['id']}", json={"role": "Owner"})
    assert update.status_code == 400
    assert update.json() == {"error": "Role must be one of: Company Admin, Team Member"}


async def test_analysis_questions_defaults_and_project_lookup(client):
    assert (await client.post("/api/analysis-questions", json={"category": "Tech"})).json() == {
        "error": "Question text is required"
    }

    first = await client.post(
        "/api/analysis-questions",
        json={"question": "Describe the innovation", "companyId": "c1", "projectId": "p1"},
    )
    assert first.status_code == 201
    question = first.json()
    assert question["answer"] == ""
    assert question["category"] == "General"
    assert question["isRequired"] is True

    await client.post(
        "/api/analysis-questions",
        json={"question": "Expected impact?", "companyId": "c1", "relatedProjects": ["Green Innovation Fund"]},
    )
    await client.post(
        "/api/analysis-questions",
        json={"question": "Budget plan?", "companyId": "c2", "projectName": "Green Innovation Fund"},
    )

    assert (await client.get("/api/analysis-questions/by-project")).status_code == 400

    by_project = await client.get("/api/analysis-questions/by-project", params={"projectId": "p1"})
    assert [q["question"] for q in by_project.json()] == ["Describe the innovation"]

    by_name = await client.get("/api/analysis-questions/by-project", params={"projectName": "green innovation"})
    assert [q["question"] for q in by_name.json()] == ["Expected impact?", "Budget plan?"]

    scoped = await client.get(
        "/api/analysis-questions/by-project",
        params={"companyId": "c1", "projectName": "Green Innovation Fund"},
    )
    assert [q["question"] for q in scoped.json()] == ["Expected impact?"]


async def test_invalid_json_body_is_a_bad_request(client):
    response = await client.post(
        "/api/companies",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


async def test_health_and_db_status(client, seed):
    await seed(CompanyService, load_fixture("companies"))

    health = await client.get("/health")
    assert health.status_code == 200
    assert health.json()["api_ok"] is True
    assert health.json()["db_ok"] is True

    status = (await client.get("/api/db-status")).json()
    assert status["status"] == "connected"
    assert status["collectionStats"]["companies"]["count"] == 2
    assert "name" in status["collectionStats"]["companies"]["sampleDocFields"]
    assert status["collectionStats"]["agents"] == {
        "exists": True,
        "count": 0,
        "hasDocuments": False,
        "sampleDocFields": [],
    }


async def test_repository_first_returns_oldest_document(session_maker):
    async with session_maker() as session:
        repository = DocumentRepository(session, Collections.REFERENCE_DOCUMENTS)
        assert await repository.first() is None

        await repository.insert_many([{"title": "Call text"}, {"title": "Budget template"}])
        await repository.commit()

        assert await repository.count() == 2
        assert (await repository.first()).data["title"] == "Call text"


async def test_db_status_lists_reference_documents(client):
    await client.post("/api/documents", json={"title": "Call text"})

    status = (await client.get("/api/db-status")).json()

    assert Collections.REFERENCE_DOCUMENTS in status["collections"]
    assert status["collectionStats"]["referenceDocuments"]["count"] == 1
    assert status["collectionStats"]["referenceDocuments"]["sampleDocFields"] == [
        "id",
        "lastModified",
        "status",
        "title",
        "uploadDate",
    ]
