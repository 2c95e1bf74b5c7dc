"""
Tests d'intégration API pour les classes et les sections.
Testent les URLs, les codes HTTP, la validation et le format des réponses.
"""

from unittest.mock import patch

from schooldesk.schemas.school_class import ClassResponse, SectionResponse


# ============================================================
# /api/classes
# ============================================================

def test_list_classes_succes(client):
    """Liste des classes → 200 avec enveloppe data."""
    with patch("schooldesk.routers.classes.class_service.get_classes") as mock:
        mock.return_value = [ClassResponse(id=1, name="Grade 5"), ClassResponse(id=2, name="Grade 6")]
        response = client.get("/api/classes")

    assert response.status_code == 200
    assert response.json() == {"data": [{"id": 1, "name": "Grade 5"}, {"id": 2, "name": "Grade 6"}]}


def test_create_class_succes(client):
    with patch("schooldesk.routers.classes.class_service.create_class") as mock:
        mock.return_value = 3
        response = client.post("/api/classes", json={"name": "Grade 5"})

    assert response.status_code == 201
    assert response.json() == {"id": 3}


def test_create_class_nom_vide(client):
    """Nom vide → 422."""
    response = client.post("/api/classes", json={"name": "   "})
    assert response.status_code == 422


def test_create_class_champ_inconnu(client):
    response = client.post("/api/classes", json={"name": "Grade 5", "year": "2025"})
    assert response.status_code == 422


def test_create_class_nom_duplique(client):
    """Nom déjà existant → 409 Conflict."""
    with patch("schooldesk.routers.classes.class_service.create_class") as mock:
        mock.side_effect = ValueError("Une classe avec le nom 'Grade 5' existe déjà.")
        response = client.post("/api/classes", json={"name": "Grade 5"})

    assert response.status_code == 409
    assert "existe déjà" in response.json()["detail"]


def test_delete_class_inexistante(client):
    """Clé absente → 200 avec changes = 0, pas d'erreur."""
    with patch("schooldesk.routers.classes.class_service.delete_class") as mock:
        mock.return_value = 0
        response = client.delete("/api/classes/42")

    assert response.status_code == 200
    assert response.json() == {"changes": 0}


def test_delete_class_avec_sections(client):
    with patch("schooldesk.routers.classes.class_service.delete_class") as mock:
        mock.side_effect = ValueError("Impossible de supprimer cette classe : des sections ...")
        response = client.delete("/api/classes/1")

    assert response.status_code == 409


def test_delete_class_id_invalide(client):
    response = client.delete("/api/classes/abc")
    assert response.status_code == 422


# ============================================================
# /api/sections
# ============================================================

def test_list_sections_filtre_par_classe(client):
    with patch("schooldesk.routers.sections.class_service.get_sections") as mock:
        mock.return_value = [SectionResponse(
            id=1, class_id=5, section_name="A", teacher_id=None,
            class_name="Grade 5", teacher_name=None,
        )]
        response = client.get("/api/sections?class_id=5")

    assert response.status_code == 200
    assert mock.call_args[0][1] == 5
    row = response.json()["data"][0]
    assert row["class_name"] == "Grade 5"
    assert row["teacher_name"] is None


def test_list_sections_sans_filtre(client):
    with patch("schooldesk.routers.sections.class_service.get_sections") as mock:
        mock.return_value = []
        response = client.get("/api/sections")

    assert response.status_code == 200
    assert mock.call_args[0][1] is None
    assert response.json() == {"data": []}


def test_create_section_champs_manquants(client):
    response = client.post("/api/sections", json={"section_name": "A"})
    assert response.status_code == 422


def test_create_section_doublon(client):
    with patch("schooldesk.routers.sections.class_service.create_section") as mock:
        mock.side_effect = ValueError("La section 'A' existe déjà pour cette classe.")
        response = client.post("/api/sections", json={"class_id": 1, "section_name": "A"})

    assert response.status_code == 409


def test_delete_section(client):
    with patch("schooldesk.routers.sections.class_service.delete_section") as mock:
        mock.return_value = 1
        response = client.delete("/api/sections/1")

    assert response.json() == {"changes": 1}
