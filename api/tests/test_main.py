import uvicorn

from wildcards import main


def test_importing_main_builds_no_application():
    assert not hasattr(main, "app")


def test_run_serves_the_application_factory(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    main.run()

    target, kwargs = calls[0]
    assert target == "wildcards.main:create_app"
    assert kwargs["factory"] is True
    assert kwargs["port"] == main.default_settings.port
