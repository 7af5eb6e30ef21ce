import sys
from subprocess import run


def test_launch_as_module_success(config_dir):

    # make sure to provide a valid bingwall command or the return code won't be zero
    result = run(
        [sys.executable, "-m", "bingwall", "state", "--url"], capture_output=True, text=True
    )

    assert result.returncode == 0
    assert result.stdout.startswith("https://www.bing.com/HPImageArchive.aspx")


def test_launch_as_module_query_before_update(config_dir):

    result = run([sys.executable, "-m", "bingwall"], capture_output=True, text=True)

    assert result.returncode == 1
    assert "bingwall update" in result.stderr
