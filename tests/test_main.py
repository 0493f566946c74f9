"""
Process entry point: the seed must exist before anything is bound, and both
startup failures exit non-zero.
"""

import socket

import pytest

from pagegen import main as main_mod
from pagegen.core.errors import BindError, GenerationError
from tests.fakes import ScriptedGenerator, page


@pytest.fixture
def busy_port():
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(("127.0.0.1", 0))
    holder.listen(1)
    yield holder.getsockname()[1]
    holder.close()


class TestMain:
    def test_seed_failure_exits_without_binding(self, monkeypatch):
        bound = []
        monkeypatch.setattr(main_mod, "bind_socket", lambda *a, **kw: bound.append(a))
        monkeypatch.setattr(main_mod, "serve", lambda *a, **kw: pytest.fail("must not serve"))

        rc = main_mod.main(ScriptedGenerator(GenerationError("Model is not ready", "m")), "127.0.0.1", 0)

        assert rc == 1
        assert bound == []

    def test_bind_failure_exits_non_zero(self, monkeypatch, busy_port):
        monkeypatch.setattr(main_mod, "serve", lambda *a, **kw: pytest.fail("must not serve"))

        rc = main_mod.main(ScriptedGenerator(page("seed")), "127.0.0.1", busy_port)

        assert rc == 1

    def test_serves_seeded_page_on_bound_socket(self, monkeypatch):
        served = {}

        def fake_serve(regenerator, sock):
            served["page"] = regenerator.serve()
            served["addr"] = sock.getsockname()

        monkeypatch.setattr(main_mod, "serve", fake_serve)

        rc = main_mod.main(ScriptedGenerator("prefix " + page("seed")), "127.0.0.1", 0)

        assert rc == 0
        assert served["page"] == page("seed")
        assert served["addr"][0] == "127.0.0.1"


class TestBindSocket:
    def test_binds_requested_address(self):
        sock = main_mod.bind_socket("127.0.0.1", 0)
        try:
            host, port = sock.getsockname()
            assert host == "127.0.0.1"
            assert port > 0
        finally:
            sock.close()

    def test_in_use_port_raises_bind_error(self, busy_port):
        with pytest.raises(BindError) as info:
            main_mod.bind_socket("127.0.0.1", busy_port)
        assert info.value.port == busy_port
        assert isinstance(info.value.cause, OSError)
