import pytest

from amsynth.config import Configuration


@pytest.fixture
def config(tmp_path):
    return Configuration(path=tmp_path / "config", default_bank="/banks/default")


def _load(tmp_path, text):
    path = tmp_path / "config"
    path.write_text(text)
    cfg = Configuration(path=path)
    cfg.load()
    return cfg


def test_defaults(config):
    assert config.sample_rate == 44100
    assert config.polyphony == 10
    assert config.audio_driver == "auto"
    assert config.alsa_audio_device == "default"
    assert config.jack_client_name_preference == "amsynth"
    assert config.current_bank_file == "/banks/default"


def test_missing_file_keeps_defaults(config):
    config.load()
    assert config == Configuration(path=config.path, default_bank="/banks/default")


def test_save_format(config):
    config.save()
    lines = config.path.read_text().splitlines()
    assert lines[0] == "midi_driver\tauto"
    assert [line.split("\t")[0] for line in lines] == [
        "midi_driver",
        "oss_midi_device",
        "midi_channel",
        "audio_driver",
        "oss_audio_device",
        "alsa_audio_device",
        "sample_rate",
        "polyphony",
        "pitch_bend_range",
        "tuning_file",
        "ignored_parameters",
        "jack_autoconnect",
    ]


def test_round_trip(config):
    config.audio_driver = "jack"
    config.midi_channel = 5
    config.sample_rate = 48000
    config.polyphony = 16
    config.pitch_bend_range = 12
    config.current_tuning_file = "tuning.scl"
    config.locked_parameters = "amp_attack"
    config.jack_autoconnect = False
    config.save()

    loaded = Configuration(path=config.path)
    loaded.load()
    assert loaded.audio_driver == "jack"
    assert loaded.midi_channel == 5
    assert loaded.sample_rate == 48000
    assert loaded.polyphony == 16
    assert loaded.pitch_bend_range == 12
    assert loaded.current_tuning_file == "tuning.scl"
    assert loaded.locked_parameters == "amp_attack"
    assert loaded.jack_autoconnect is False


def test_comments_are_skipped(tmp_path):
    cfg = _load(tmp_path, "# sample_rate 1\nsample_rate 48000 # polyphony 3\n#\npolyphony 4\n")
    assert cfg.sample_rate == 48000
    assert cfg.polyphony == 4


def test_value_may_follow_on_next_line(tmp_path):
    cfg = _load(tmp_path, "midi_driver\nalsa\n")
    assert cfg.midi_driver == "alsa"


def test_unknown_key_consumes_next_token(tmp_path):
    cfg = _load(tmp_path, "bogus polyphony 4\n")
    assert cfg.polyphony == Configuration().polyphony


def test_integer_values_parse_like_a_stream(tmp_path):
    cfg = _load(tmp_path, "sample_rate 48000Hz\nmidi_channel abc\n")
    assert cfg.sample_rate == 48000
    assert cfg.midi_channel == 0


def test_jack_autoconnect_only_true_enables(tmp_path):
    assert _load(tmp_path, "jack_autoconnect yes\n").jack_autoconnect is False
    assert _load(tmp_path, "jack_autoconnect true\n").jack_autoconnect is True


def test_reset_defaults_keeps_locked_parameters(config):
    config.sample_rate = 96000
    config.audio_driver = "oss"
    config.current_bank_file = "/elsewhere"
    config.locked_parameters = "amp_decay"
    config.reset_defaults()
    assert config.sample_rate == 44100
    assert config.audio_driver == "auto"
    assert config.current_bank_file == "/banks/default"
    assert config.locked_parameters == "amp_decay"


def test_save_without_path_raises():
    with pytest.raises(OSError):
        Configuration().save()


def test_save_to_missing_directory_raises(tmp_path):
    cfg = Configuration(path=tmp_path / "missing" / "config")
    with pytest.raises(OSError):
        cfg.save()