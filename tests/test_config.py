"""Unit tests for settings loading and validation helpers."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from vppsh_lib.config import (
    DEFAULT_REPLY_LIMIT,
    VPP_CLI_SOCKET,
    Settings,
    SettingsError,
    load_settings,
    loopback_instance,
    netmask_to_prefix,
    settings_from_dict,
    split_subinterface,
    validate_ipv4,
    validate_ipv6_cidr,
)


class NetmaskTest(unittest.TestCase):

    def test_dotted_masks(self) -> None:
        cases = {
            "255.255.255.0": 24,
            "255.255.0.0": 16,
            "255.255.255.252": 30,
            "255.255.255.255": 32,
            "255.255.254.0": 23,
            "0.0.0.0": 0,
        }
        for mask, prefix in cases.items():
            self.assertEqual(netmask_to_prefix(mask), prefix, mask)

    def test_prefix_lengths(self) -> None:
        self.assertEqual(netmask_to_prefix("24"), 24)
        self.assertEqual(netmask_to_prefix("/16"), 16)

    def test_rejects_bad_masks(self) -> None:
        for mask in ("255.0.255.0", "0.0.0.255", "33", "255.255.255.256", "mask"):
            with self.assertRaises(ValueError, msg=mask):
                netmask_to_prefix(mask)


class NameHelpersTest(unittest.TestCase):

    def test_loopback_instance(self) -> None:
        self.assertEqual(loopback_instance("loop12"), 12)
        self.assertIsNone(loopback_instance("loopback0"))
        self.assertIsNone(loopback_instance("loop"))

    def test_split_subinterface(self) -> None:
        self.assertEqual(split_subinterface("BondEthernet0.200"), ("BondEthernet0", 200))
        self.assertIsNone(split_subinterface("BondEthernet0"))
        self.assertIsNone(split_subinterface("BondEthernet0.5000"))

    def test_address_validation(self) -> None:
        self.assertTrue(validate_ipv4("192.0.2.1"))
        self.assertFalse(validate_ipv4("192.0.2.300"))
        self.assertTrue(validate_ipv6_cidr("2001:db8::1/64"))
        self.assertFalse(validate_ipv6_cidr("10.0.0.1/24"))


class SettingsTest(unittest.TestCase):

    def setUp(self) -> None:
        self.directory = Path(tempfile.mkdtemp())

    def tearDown(self) -> None:
        shutil.rmtree(self.directory)

    def write(self, text: str) -> Path:
        path = self.directory / "vppsh.yaml"
        path.write_text(text)
        return path

    def test_missing_file_gives_defaults(self) -> None:
        settings = load_settings(self.directory / "absent.yaml")
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.socket, VPP_CLI_SOCKET)
        self.assertEqual(settings.reply_limit, DEFAULT_REPLY_LIMIT)

    def test_empty_file_gives_defaults(self) -> None:
        self.assertEqual(load_settings(self.write("")), Settings())

    def test_values_are_loaded(self) -> None:
        path = self.write(
            "socket: /tmp/vpp/cli.sock\n"
            "transport: vppctl\n"
            "timeout: 2\n"
            "reply_limit: 65536\n"
            "max_addresses: 16\n"
        )
        settings = load_settings(path)
        self.assertEqual(settings.socket, Path("/tmp/vpp/cli.sock"))
        self.assertEqual(settings.transport, "vppctl")
        self.assertEqual(settings.timeout, 2.0)
        self.assertEqual(settings.reply_limit, 65536)
        self.assertEqual(settings.max_addresses, 16)

    def test_environment_selects_file(self) -> None:
        path = self.write("max_addresses: 3\n")
        with patch.dict(os.environ, {"VPPSH_CONFIG": str(path)}):
            self.assertEqual(load_settings().max_addresses, 3)

    def test_yaml_syntax_error(self) -> None:
        with self.assertRaises(SettingsError):
            load_settings(self.write("socket: [unclosed\n"))

    def test_unreadable_path(self) -> None:
        with self.assertRaises(SettingsError) as cm:
            load_settings(self.directory)
        self.assertIn("Cannot read", str(cm.exception))

    def test_undecodable_file(self) -> None:
        path = self.directory / "vppsh.yaml"
        path.write_bytes(b"socket: \xff\xfe\n")
        with self.assertRaises(SettingsError):
            load_settings(path)

    def test_non_mapping_is_rejected(self) -> None:
        with self.assertRaises(SettingsError):
            load_settings(self.write("- socket\n"))

    def test_invalid_values(self) -> None:
        for data in ({"colour": "red"}, {"transport": "ssh"}, {"reply_limit": 0},
                     {"max_addresses": True}, {"timeout": "fast"}, {"socket": ""}):
            with self.assertRaises(SettingsError, msg=str(data)):
                settings_from_dict(data)


if __name__ == "__main__":
    unittest.main()
