from __future__ import annotations

import time


def _wait_alive(client, timeout_s: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if client.is_alive():
            return True
        time.sleep(0.05)
    return False


def test_run_auto_attaches_to_existing_server(tmp_path) -> None:
    """If a backend is reachable at host/port, jamal.run() attaches instead of starting another."""

    import jamal
    from jamal.sdk.client import JamalClient

    server = jamal.run(host="127.0.0.1", port=0, data_dir=tmp_path, new_server=True)
    assert _wait_alive(server.client())

    attached = jamal.run(host=server.host, port=server.port)

    assert isinstance(attached, JamalClient)
    assert attached.base_url.rstrip("/") == f"http://{server.host}:{server.port}"

    attached.add_recent_file("/a.jamal", "A")
    assert (tmp_path / "recent_files.json").exists()
    assert [f.path for f in attached.get_recent_files()] == ["/a.jamal"]


def test_run_new_server_forces_start_even_if_env_url_is_set(tmp_path, monkeypatch) -> None:
    import jamal
    from jamal.runtime.server import JamalServer

    s1 = jamal.run(host="127.0.0.1", port=0, data_dir=tmp_path / "one", new_server=True)
    assert _wait_alive(s1.client())

    monkeypatch.setenv("JAMAL_URL", f"http://{s1.host}:{s1.port}")
    s2 = jamal.run(host="127.0.0.1", port=0, data_dir=tmp_path / "two", new_server=True)

    assert isinstance(s2, JamalServer)
    assert (s2.host, s2.port) != (s1.host, s1.port)
    assert s2.data_dir == tmp_path / "two"
