"""Unit tests for the session state store and interface-mode entry."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from vppsh_lib.session import (
    SESSION_ENV,
    InterfaceEntryError,
    SessionError,
    SessionStore,
    creation_command,
    enter_interface,
    resolve_session_key,
)

from stub_engine import FakeVPP


class SessionStoreTest(unittest.TestCase):

    def setUp(self) -> None:
        self.directory = tempfile.mkdtemp()
        self.store = SessionStore(Path(self.directory) / "sessions")

    def tearDown(self) -> None:
        shutil.rmtree(self.directory)

    def test_unknown_session_has_no_interface(self) -> None:
        self.assertIsNone(self.store.get_current("1234"))

    def test_set_then_get(self) -> None:
        self.store.set_current("1234", "loop5")
        self.assertEqual(self.store.get_current("1234"), "loop5")

    def test_set_replaces_previous_value(self) -> None:
        self.store.set_current("1234", "loop5")
        self.store.set_current("1234", "GigabitEthernet0/8/0")
        self.assertEqual(self.store.get_current("1234"), "GigabitEthernet0/8/0")

    def test_clear(self) -> None:
        self.store.set_current("1234", "loop5")
        self.store.clear_current("1234")
        self.assertIsNone(self.store.get_current("1234"))

    def test_clear_without_record_is_harmless(self) -> None:
        self.store.clear_current("never-set")
        self.assertIsNone(self.store.get_current("never-set"))

    def test_sessions_are_independent(self) -> None:
        self.store.set_current("1", "loop1")
        self.store.set_current("2", "loop2")
        self.store.clear_current("1")
        self.assertIsNone(self.store.get_current("1"))
        self.assertEqual(self.store.get_current("2"), "loop2")

    def test_key_is_sanitised_into_file_name(self) -> None:
        path = self.store.path_for("../tty/3")
        self.assertEqual(path.parent, self.store.directory)
        self.assertEqual(path.name, "vppsh-.._tty_3.iface")

    def test_no_temporary_files_left_behind(self) -> None:
        self.store.set_current("1234", "loop5")
        self.assertEqual(os.listdir(self.store.directory), ["vppsh-1234.iface"])

    def test_undecodable_record(self) -> None:
        self.store.directory.mkdir()
        self.store.path_for("1234").write_bytes(b"\xff\xfe\n")
        with self.assertRaises(SessionError) as cm:
            self.store.get_current("1234")
        self.assertIn("Cannot access session state", str(cm.exception))

    def test_session_directory_below_a_file(self) -> None:
        blocker = Path(self.directory) / "file"
        blocker.write_text("")
        store = SessionStore(blocker / "sessions")
        with self.assertRaises(SessionError):
            store.set_current("1234", "loop5")
        with self.assertRaises(SessionError):
            store.get_current("1234")


class SessionKeyTest(unittest.TestCase):

    def test_explicit_token_wins(self) -> None:
        with patch.dict(os.environ, {SESSION_ENV: "from-env"}):
            self.assertEqual(resolve_session_key("tty3"), "tty3")

    def test_environment_token(self) -> None:
        with patch.dict(os.environ, {SESSION_ENV: "from-env"}):
            self.assertEqual(resolve_session_key(), "from-env")

    def test_parent_pid_fallback(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with patch("vppsh_lib.session.store.os.getppid", return_value=4321):
                self.assertEqual(resolve_session_key(), "4321")


class EnterInterfaceTest(unittest.TestCase):

    def setUp(self) -> None:
        self.directory = tempfile.mkdtemp()
        self.store = SessionStore(self.directory)

    def tearDown(self) -> None:
        shutil.rmtree(self.directory)

    def test_creation_commands(self) -> None:
        self.assertEqual(creation_command("loop5"), "create loopback interface instance 5")
        self.assertEqual(creation_command("GigabitEthernet0/8/0.100"),
                         "create sub-interfaces GigabitEthernet0/8/0 100")
        self.assertIsNone(creation_command("GigabitEthernet0/8/0"))
        self.assertIsNone(creation_command("GigabitEthernet0/8/0.4096"))
        self.assertIsNone(creation_command("GigabitEthernet0/8/0.0"))

    def test_physical_interface_is_not_created(self) -> None:
        vpp = FakeVPP({})
        enter_interface("GigabitEthernet0/8/0", self.store, "s", vpp)
        self.assertEqual(vpp.commands, [])
        self.assertEqual(self.store.get_current("s"), "GigabitEthernet0/8/0")

    def test_loopback_is_created(self) -> None:
        vpp = FakeVPP({}, default="loop5\n")
        enter_interface("loop5", self.store, "s", vpp)
        self.assertEqual(vpp.commands, ["create loopback interface instance 5"])
        self.assertEqual(self.store.get_current("s"), "loop5")

    def test_existing_interface_counts_as_success(self) -> None:
        vpp = FakeVPP({}, default="create loopback: instance 5 already in use\n")
        enter_interface("loop5", self.store, "s", vpp)
        enter_interface("loop5", self.store, "s", vpp)
        self.assertEqual(self.store.get_current("s"), "loop5")
        self.assertEqual(vpp.commands, ["create loopback interface instance 5"] * 2)

    def test_fresh_creation_then_existing_interface(self) -> None:
        vpp = FakeVPP({}, default="loop5\n")
        enter_interface("loop5", self.store, "s", vpp)
        vpp.default = "create loopback: instance 5 already in use\n"
        enter_interface("loop5", self.store, "s", vpp)
        self.assertEqual(vpp.commands, ["create loopback interface instance 5"] * 2)
        self.assertEqual(self.store.get_current("s"), "loop5")

    def test_rejection_mentioning_in_use_is_a_failure(self) -> None:
        vpp = FakeVPP({}, default="create sub-interfaces: vlan 10 in use by another interface, failed\n")
        with self.assertRaises(InterfaceEntryError):
            enter_interface("GigabitEthernet0/8/0.10", self.store, "s", vpp)
        self.assertIsNone(self.store.get_current("s"))

    def test_unwritable_session_directory_creates_nothing(self) -> None:
        blocker = Path(self.directory) / "file"
        blocker.write_text("")
        store = SessionStore(blocker / "sessions")
        vpp = FakeVPP({}, default="loop5\n")
        with self.assertRaises(SessionError):
            enter_interface("loop5", store, "s", vpp)
        self.assertEqual(vpp.commands, [])

    def test_failed_creation_leaves_session_unchanged(self) -> None:
        self.store.set_current("s", "loop1")
        vpp = FakeVPP({}, default="create sub-interfaces: unknown interface `bogus0'\n")
        with self.assertRaises(InterfaceEntryError):
            enter_interface("bogus0.10", self.store, "s", vpp)
        self.assertEqual(self.store.get_current("s"), "loop1")


if __name__ == "__main__":
    unittest.main()
