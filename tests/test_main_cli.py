from __future__ import annotations

import pytest

from conftest import FakeResponse, FakeSession, RecordingDelayPolicy, result_html, search_page_html
from csv_storage import read_candidates_csv
from google_searcher import build_search_query, build_search_url
from models.fetch_identity import FetchIdentity
from pipelines import scrape_candidates as scrape_module
from services.identity_provider import FixedSequenceIdentityProvider


QUERY_ARGS = ["-k", "valves", "-l", "Pune", "-i", "Energy", "-e", "3 years", "--max-pages", "1"]


@pytest.fixture
def install_session(monkeypatch, settings):
    """Route main's fetcher through a fake session."""
    import main

    def _install(session):
        def _build_fetcher(s, rng=None, cancel_event=None, **kwargs):
            return scrape_module.build_fetcher(
                s,
                rng=rng,
                cancel_event=cancel_event,
                identity_provider=FixedSequenceIdentityProvider([FetchIdentity(user_agent="cli-test")]),
                delay_policy=RecordingDelayPolicy(),
                session=session,
            )
        monkeypatch.setattr(main, "build_fetcher", _build_fetcher)
        return main

    return _install


def _first_page_url(settings):
    return build_search_url(build_search_query("valves", "Pune", "Energy", "3 years"), settings.google_search_url)


def test_successful_run_writes_csv_and_exits_zero(install_session, settings, tmp_path, capsys):
    session = FakeSession({_first_page_url(settings): [
        FakeResponse(200, search_page_html(result_html("kim", "Kim", "3 years")))
    ]})
    main = install_session(session)
    output = tmp_path / "out.csv"

    code = main.main(QUERY_ARGS + ["--no-enrich", "-o", str(output)])

    assert code == 0
    rows = read_candidates_csv(output)
    assert [(r.name, r.experience_years) for r in rows] == [("Kim", 3)]
    assert "Successfully wrote 1 candidates" in capsys.readouterr().out


def test_no_candidates_exits_cleanly_without_file(install_session, settings, tmp_path, capsys):
    main = install_session(FakeSession({_first_page_url(settings): [FakeResponse(200, "<html></html>")]}))
    output = tmp_path / "out.csv"

    code = main.main(QUERY_ARGS + ["-o", str(output)])

    assert code == 0
    assert not output.exists()
    assert "No candidates found." in capsys.readouterr().out


def test_unwritable_output_exits_non_zero(install_session, settings, tmp_path):
    session = FakeSession({_first_page_url(settings): [
        FakeResponse(200, search_page_html(result_html("lee", "Lee")))
    ]})
    main = install_session(session)

    code = main.main(QUERY_ARGS + ["--no-enrich", "-o", str(tmp_path / "missing" / "out.csv")])

    assert code == 1


def test_dry_run_makes_no_requests(install_session, settings, capsys):
    session = FakeSession()
    main = install_session(session)

    assert main.main(QUERY_ARGS + ["--dry-run"]) == 0
    assert session.calls == []
    assert "site%3Alinkedin.com%2Fin" in capsys.readouterr().out
