from winudid.test_init import *


class TestRegistry(unittest.IsolatedAsyncioTestCase):
    async def test_parse_reg_guid(self):
        self.assertEqual(parse_reg_guid(reg_out(MACHINE_GUID)), MACHINE_GUID)

    async def test_parse_reg_guid_mismatch(self):
        out = "ERROR: The system was unable to find the specified registry key or value.\r\n"
        with self.assertRaises(ErrorParseOutput):
            parse_reg_guid(out)

    async def test_reg_args(self):
        self.assertEqual(
            reg_key(),
            ("reg", "query", "HKLM\\SOFTWARE\\Microsoft\\Cryptography", "/v", "MachineGuid")
        )

    async def test_collect(self):
        collector = RegistryCollector(runner=windows_runner(guid=MACHINE_GUID))
        udid = await collector.collect()
        self.assertEqual(udid, sha256_hex(MACHINE_GUID))

    async def test_access_denied(self):
        runner = windows_runner(guid=ErrorCmdFailed("reg", 1))
        collector = RegistryCollector(runner=runner)
        self.assertIsNone(await collector.collect())
        self.assertEqual(collector.fields[0].error, FIELD_NON_ZERO_EXIT)

    async def test_unparseable(self):
        runner = FakeCmdRunner()
        runner.set_result(reg_key(), "garbage\r\n")
        collector = RegistryCollector(runner=runner)
        self.assertIsNone(await collector.collect())
        self.assertEqual(collector.fields[0].error, FIELD_UNPARSEABLE)

    async def test_winregistry_reader(self):
        conf = dict_child({"registry_reader": "winregistry"}, UDID_CONF)
        guid = AsyncMock(return_value=MACHINE_GUID)
        with patch("winudid.win_reg.winregistry_guid", new=guid):
            runner = FakeCmdRunner()
            collector = RegistryCollector(runner=runner, conf=conf)
            udid = await collector.collect()

        self.assertEqual(udid, sha256_hex(MACHINE_GUID))
        self.assertEqual(runner.calls, [])

    async def test_winregistry_access_denied(self):
        conf = dict_child({"registry_reader": "winregistry"}, UDID_CONF)
        guid = AsyncMock(side_effect=PermissionError(13, "Access is denied"))
        with patch("winudid.win_reg.winregistry_guid", new=guid):
            collector = RegistryCollector(conf=conf)
            self.assertIsNone(await collector.collect())

        self.assertEqual(collector.fields[0].error, FIELD_TOOL_UNAVAILABLE)

    async def test_winregistry_missing(self):
        if sys.platform == "win32":
            return

        conf = dict_child({"registry_reader": "winregistry"}, UDID_CONF)
        collector = RegistryCollector(conf=conf)
        self.assertIsNone(await collector.collect())
        self.assertEqual(collector.fields[0].error, FIELD_TOOL_UNAVAILABLE)

if __name__ == '__main__':
    main()
