from eva_ws.utils.errors import (
    CollaboratorError,
    EvaError,
    MissingIdentifiersError,
    NotFoundError,
    ProblemDetail,
    SpeciesError,
    ValidationError,
)


def test_problem_detail_drops_empty_fields():
    problem = ProblemDetail(title="Error", status=400)
    assert problem.model_dump() == {"title": "Error", "status": 400, "type": "about:blank"}
    assert problem.is_client_error


def test_eva_error_wraps_problem():
    error = EvaError("Oops", status=503, detail="maintenance")
    assert error.message == "Oops"
    assert error.problem.status == 503
    assert error.problem.detail == "maintenance"
    assert error.problem.extra == {"code": "internal-error"}
    assert not error.problem.is_client_error


def test_error_taxonomy_statuses():
    assert isinstance(SpeciesError("x"), ValidationError)
    assert isinstance(MissingIdentifiersError("x"), ValidationError)
    assert SpeciesError("x").problem.status == 400
    assert NotFoundError("Study identifier not found").problem.status == 400
    assert CollaboratorError("down").problem.status == 500


def test_problem_type_names_the_error_code():
    problem = MissingIdentifiersError("missing").problem
    assert problem.type.endswith("/missing-identifiers")
    assert problem.model_dump()["extra"] == {"code": "missing-identifiers"}
