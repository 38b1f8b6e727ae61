"""
Tests for the goisort command line.
"""

from goisort.cli import main

from .conftest import LOCAL_PKG, run_cli, write


UNSORTED = 'package main\n\nimport (\n\t"strings"\n\t"fmt"\n)\n'
SORTED = 'package main\n\nimport (\n\t"fmt"\n\t"strings"\n)\n'


def test_cli_reports_files_needing_changes(tmp_path, capsys):
    a = write(tmp_path / "a.go", UNSORTED)
    b = write(tmp_path / "b.go", SORTED)
    rc = main([str(a), str(b)])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [str(a)]
    assert a.read_text(encoding="utf-8") == UNSORTED


def test_cli_write(tmp_path):
    a = write(tmp_path / "a.go", UNSORTED)
    assert main(["-w", str(a)]) == 0
    assert a.read_text(encoding="utf-8") == SORTED


def test_cli_local_package(data_dir, tmp_path):
    path = tmp_path / "test2.go"
    path.write_bytes((data_dir / "test2.go").read_bytes())
    assert main(["--local_package", LOCAL_PKG, "--write", str(path)]) == 0
    assert path.read_bytes() == (data_dir / "test2_reformatted.go").read_bytes()


def test_cli_parse_failure(tmp_path, capsys):
    bad = write(tmp_path / "bad.go", 'import "fmt"\n')
    good = write(tmp_path / "good.go", UNSORTED)
    rc = main(["-w", str(bad), str(good)])
    assert rc == 1
    assert "Failed to parse" in capsys.readouterr().err
    # Processing stops at the first failing file.
    assert good.read_text(encoding="utf-8") == UNSORTED


def test_cli_config_file(tmp_path):
    a = write(tmp_path / "a.go", 'package main\n\nimport (\n\t"x.com/lib"\n\t"me/app"\n)\n')
    cfg = write(tmp_path / "goisort.yaml", "local_package: me/app\nwrite: true\n")
    assert main(["--config", str(cfg), str(a)]) == 0
    assert a.read_text(encoding="utf-8") == 'package main\n\nimport (\n\t"x.com/lib"\n\n\t"me/app"\n)\n'


def test_cli_bad_config(tmp_path, capsys):
    a = write(tmp_path / "a.go", SORTED)
    cfg = write(tmp_path / "goisort.yaml", "bogus: 1\n")
    assert main(["--config", str(cfg), str(a)]) == 1
    assert "unknown keys" in capsys.readouterr().err


def test_cli_stdlib_file(tmp_path, capsys):
    a = write(tmp_path / "a.go", 'package main\n\nimport (\n\t"fmt"\n\t"iter"\n)\n')
    std = write(tmp_path / "std.txt", "fmt\n")
    # Without "iter" in the list it is a local package and needs its own group.
    assert main(["--stdlib-file", str(std), str(a)]) == 0
    assert capsys.readouterr().out.splitlines() == [str(a)]


def test_cli_module_entrypoint(tmp_path):
    write(tmp_path / "a.go", UNSORTED)
    cp = run_cli(tmp_path, "-w", "a.go")
    assert cp.returncode == 0, cp.stderr
    assert (tmp_path / "a.go").read_text(encoding="utf-8") == SORTED


def test_cli_requires_files(tmp_path):
    cp = run_cli(tmp_path)
    assert cp.returncode == 1
    assert "usage" in cp.stderr


def test_cli_unknown_flag(tmp_path):
    write(tmp_path / "a.go", SORTED)
    cp = run_cli(tmp_path, "--bogus", "a.go")
    assert cp.returncode == 1
