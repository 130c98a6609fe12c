from listings.core import config


def setup_function(function):
    config.get_settings.cache_clear()


def teardown_function(function):
    config.get_settings.cache_clear()


def test_get_settings_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LISTINGS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LISTINGS_OUTPUT_PATH", str(tmp_path / "out.json"))
    monkeypatch.setenv("LISTINGS_FILES", "a.json, b.json,,")
    monkeypatch.setenv("LISTINGS_USE_SAMPLE", "yes")

    settings = config.get_settings()

    assert settings.data_dir == str(tmp_path)
    assert settings.output_path == str(tmp_path / "out.json")
    assert settings.listing_files == ("a.json", "b.json")
    assert settings.use_sample is True


def test_get_settings_defaults(monkeypatch, tmp_path, caplog):
    for name in ("LISTINGS_DATA_DIR", "LISTINGS_OUTPUT_PATH", "LISTINGS_FILES", "LISTINGS_USE_SAMPLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    with caplog.at_level("WARNING"):
        settings = config.get_settings()

    assert settings.data_dir == str(tmp_path / "data" / "listings")
    assert settings.output_path == str(tmp_path / "public" / "listings.json")
    assert settings.listing_files == config.DEFAULT_LISTING_FILES
    assert settings.use_sample is False
    assert "does not exist" in " ".join(caplog.messages)


def test_listing_files_star_means_discover(monkeypatch, tmp_path):
    monkeypatch.setenv("LISTINGS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LISTINGS_FILES", "*")

    assert config.get_settings().listing_files is None


def test_get_settings_is_cached(monkeypatch, tmp_path):
    monkeypatch.setenv("LISTINGS_DATA_DIR", str(tmp_path))
    first = config.get_settings()
    monkeypatch.setenv("LISTINGS_DATA_DIR", str(tmp_path / "other"))

    assert config.get_settings() is first
