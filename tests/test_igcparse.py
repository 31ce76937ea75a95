"""
Integration tests for igcparse.py main script
End-to-end testing of the decoding pipeline
"""
import json

import pytest
from igcparse import process_file, process_files, output_path_for, main
from igc_config import Config


class TestOutputPath:
    """Tests for output_path_for"""

    def test_into_output_folder(self, mock_cli_args, temp_output_dir):
        config = Config(mock_cli_args)
        assert output_path_for(config, '/data/flights/vuelo.igc') == temp_output_dir / 'vuelo.json'

    def test_next_to_input(self, mock_cli_args, tmp_path):
        mock_cli_args.output = None
        config = Config(mock_cli_args)
        assert output_path_for(config, str(tmp_path / 'vuelo.igc')) == tmp_path / 'vuelo.json'


class TestProcessFile:
    """Tests for process_file function"""

    def test_process_single_igc_file(self, sample_igc_file, mock_cli_args, temp_output_dir):
        """Test processing a single valid IGC file to JSON"""
        config = Config(mock_cli_args)

        success = process_file(config, str(sample_igc_file))

        assert success
        expected_output = temp_output_dir / "test_flight.json"
        assert expected_output.exists()

        document = json.loads(expected_output.read_text())
        assert document['kinds'] == ['A', 'B', 'H']
        assert len(document['records']['B']) == 9

    def test_summary_output(self, sample_igc_file, mock_cli_args, temp_output_dir, capsys):
        mock_cli_args.format = 'summary'
        config = Config(mock_cli_args)

        assert process_file(config, str(sample_igc_file))

        out = capsys.readouterr().out
        assert out.startswith('XXXABC - 16/07/01')
        assert list(temp_output_dir.iterdir()) == []

    def test_process_nonexistent_file(self, mock_cli_args):
        config = Config(mock_cli_args)
        assert not process_file(config, "/nonexistent/file.igc")

    def test_process_invalid_file(self, tmp_path, mock_cli_args, temp_output_dir):
        """A line without a record letter fails the whole file"""
        invalid_file = tmp_path / "not_igc.txt"
        invalid_file.write_text("This is not an IGC file\nJust some random text\n")

        config = Config(mock_cli_args)

        assert not process_file(config, str(invalid_file))
        assert list(temp_output_dir.iterdir()) == []

    def test_failed_lines_still_succeed(self, tmp_path, mock_cli_args, temp_output_dir, caplog):
        igc_file = tmp_path / "partial.igc"
        igc_file.write_text(
            "AXCS001\n"
            "HFDTE230525\n"
            "B2514288099883N00805990EA0090200902\n"
            "B1214298059900N00806000EA0090500905\n"
        )
        config = Config(mock_cli_args)

        assert process_file(config, str(igc_file))
        assert "1 lines of" in caplog.text

        document = json.loads((temp_output_dir / "partial.json").read_text())
        fixes = document['records']['B']
        assert fixes[0]['error']['type'] == 'TimeRangeError'
        assert fixes[1]['record']['pressure_altitude'] == 905

    def test_creates_output_directory(self, tmp_path, sample_igc_file, mock_cli_args):
        new_output_dir = tmp_path / "new_output"
        mock_cli_args.output = str(new_output_dir)
        config = Config(mock_cli_args)

        assert process_file(config, str(sample_igc_file))
        assert (new_output_dir / "test_flight.json").is_file()


class TestProcessFiles:
    """Tests for process_files function (batch processing)"""

    def test_process_multiple_files(self, tmp_path, mock_cli_args, sample_igc_content, temp_output_dir):
        files = [tmp_path / f"flight{i}.igc" for i in (1, 2, 3)]
        for f in files:
            f.write_text(sample_igc_content)

        config = Config(mock_cli_args)

        assert process_files(config, [str(f) for f in files]) == 3
        output_names = {f.name for f in temp_output_dir.glob("*.json")}
        assert output_names == {"flight1.json", "flight2.json", "flight3.json"}

    def test_process_no_files(self, mock_cli_args):
        config = Config(mock_cli_args)
        assert process_files(config, []) == 0

    def test_process_mixed_valid_invalid(self, tmp_path, mock_cli_args, sample_igc_content, temp_output_dir):
        valid_file = tmp_path / "valid.igc"
        invalid_file = tmp_path / "invalid.igc"
        valid_file.write_text(sample_igc_content)
        invalid_file.write_text("Not an IGC file")

        config = Config(mock_cli_args)

        assert process_files(config, [str(invalid_file), str(valid_file)]) == 1
        assert [f.name for f in temp_output_dir.glob("*.json")] == ["valid.json"]


class TestMain:
    """Tests for the command line entry point"""

    @pytest.fixture(autouse=True)
    def no_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

    def test_json_run(self, sample_igc_file, temp_output_dir):
        code = main(['-k', 'BH', '-f', 'json', '-o', str(temp_output_dir), str(sample_igc_file)])
        assert code == 0
        document = json.loads((temp_output_dir / "test_flight.json").read_text())
        assert document['kinds'] == ['B', 'H']

    def test_summary_run(self, sample_igc_file, capsys):
        assert main([str(sample_igc_file)]) == 0
        assert 'L Comments:' in capsys.readouterr().out

    def test_some_files_failed(self, sample_igc_file, tmp_path):
        bad_file = tmp_path / "bad.igc"
        bad_file.write_text("AXCS001\n\nLcomment\n")
        assert main([str(sample_igc_file), str(bad_file)]) == 2

    def test_unknown_format_rejected(self, sample_igc_file):
        with pytest.raises(SystemExit):
            main(['-f', 'xml', str(sample_igc_file)])
