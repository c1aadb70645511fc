"""
명령행 실행 테스트
"""

from metro_segment.main import main


class TestMain:

    def test_usage_when_not_enough_stops(self, capsys):
        exit_code = main(["계양역(arex)"])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert out.startswith("Usage: metro-segment")
        assert "Ex:" in out

    def test_usage_without_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_route_output(self, tmp_path, capsys):
        exit_code = main(
            ["--data", str(tmp_path / "none.csv"), "계양역(arex)", "김포공항역(9)", "노량진역"]
        )

        out = capsys.readouterr().out.strip()
        assert exit_code == 0
        assert out == (
            "6.6km(7분, 계양역-김포공항역, 직선 5.8km), "
            "18.4km(23분, 김포공항역-노량진역, 직선 13.5km)"
        )

    def test_error_segment_output(self, tmp_path, capsys):
        exit_code = main(["--data", str(tmp_path / "none.csv"), "계양역(99)", "노량진역"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Error: 존재하지 않는 노선(99)"

    def test_csv_data_option(self, sample_csv, capsys):
        exit_code = main(["--data", str(sample_csv), "시청(2)", "을지로3가"])

        assert exit_code == 0
        # 1.6km / 40km/h => 2.4분
        assert capsys.readouterr().out.strip() == "1.6km(2분, 시청-을지로3가)"
