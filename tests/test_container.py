"""
Composition root and command line tests
"""


class TestGeneratorContainerFactory:
    """Container assembly"""

    def test_create_for_testing(self):
        from app.container_factory import GeneratorContainerFactory
        from app.protocols import IConfigService, IEventBus, IScaleGenerator, IVariableStore

        container = GeneratorContainerFactory.create_for_testing()
        try:
            assert isinstance(container.config, IConfigService)
            assert isinstance(container.event_bus, IEventBus)
            assert isinstance(container.store, IVariableStore)
            assert isinstance(container._scale_generator, IScaleGenerator)
            assert container.state.options.hex_color == "#3B82F6"
        finally:
            container.cleanup()

    def test_diagnostics_reach_event_bus(self):
        """The state's sink republishes diagnostics as events."""
        from app.container_factory import GeneratorContainerFactory
        from core.event_bus import EventType

        container = GeneratorContainerFactory.create_for_testing(max_modes_per_collection=1)
        warnings = []
        container.event_bus.subscribe(EventType.WARNING_RECORDED, warnings.append)
        try:
            report = container.generation.generate()
        finally:
            container.cleanup()

        assert warnings == report.warnings
        assert len(warnings) == 1

    def test_errors_reach_event_bus(self):
        from app.container_factory import GeneratorContainerFactory
        from core.event_bus import EventType
        from models.results import GenerationStatus

        container = GeneratorContainerFactory.create_for_testing(read_only=True)
        errors = []
        container.event_bus.subscribe(EventType.ERROR_RECORDED, errors.append)
        try:
            report = container.generation.generate()
        finally:
            container.cleanup()

        assert report.status is GenerationStatus.ABORTED
        assert errors == report.errors

    def test_create_applies_config_defaults(self, tmp_path):
        import yaml
        from app.container_factory import GeneratorContainerFactory

        path = tmp_path / "cli.yaml"
        path.write_text(
            yaml.safe_dump({"defaults": {"hex_color": "#FF5733", "appearance": "light"}}),
            encoding="utf-8",
        )

        container = GeneratorContainerFactory.create(config_path=str(path))
        try:
            assert container.state.options.hex_color == "#FF5733"
            assert container.state.options.appearance == "light"
        finally:
            container.cleanup()

    def test_cleanup_closes_store(self):
        from app.container_factory import GeneratorContainerFactory

        container = GeneratorContainerFactory.create_for_testing()
        container.cleanup()

        assert container.store.is_closed


class TestMain:
    """Command line entry point"""

    def test_complete_run_exits_zero(self, tmp_path, capsys):
        from main import main

        code = main(["--config", str(tmp_path / "cli.yaml"), "--appearance", "light"])

        out = capsys.readouterr().out
        assert code == 0
        assert "status=complete" in out
        assert "SCS Primitive 1.0" in out

    def test_direct_path_with_documentation(self, tmp_path, capsys):
        from main import main

        code = main([
            "--config", str(tmp_path / "cli.yaml"),
            "--no-primitives", "--documentation", "--font", "inter",
        ])

        out = capsys.readouterr().out
        assert code == 0
        assert "SCS Color 1.0" in out
        assert "SCS Spacing 1.0" in out
        assert "Sf-neutral-primary" in out

    def test_invalid_brand_exits_two(self, tmp_path, capsys):
        from main import main

        code = main(["--config", str(tmp_path / "cli.yaml"), "--brand", "#nothex"])

        assert code == 2
        assert "Invalid hex color: #nothex" in capsys.readouterr().err

    def test_option_overrides_skip_unset(self):
        from main import build_parser, option_overrides

        args = build_parser().parse_args(["--brand", "#000000"])

        assert option_overrides(args) == {"hex_color": "#000000"}
