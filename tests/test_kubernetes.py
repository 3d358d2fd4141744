import subprocess
from unittest import mock

import pytest

from civokit.kubernetes import (
    AppPlan,
    InstalledApplication,
    MarketplaceApplication,
    NodePool,
    UnknownApplicationError,
    obtain_kube_config,
    remove_application_from_installed_list,
    remove_node_pool,
    requested_split,
    size_type,
    trim_id,
    update_node_pool,
)


@pytest.fixture
def marketplace():
    return [
        MarketplaceApplication(name="mysql", plans=[]),
        MarketplaceApplication(
            name="postgresql",
            plans=[AppPlan(label="5GB"), AppPlan(label="10GB")],
        ),
        MarketplaceApplication(name="redis"),
    ]


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_remove_application_simple_name():
    current = [InstalledApplication(name="mysql")]
    assert remove_application_from_installed_list(current, "mysql") == ""


def test_remove_application_missing():
    current = [InstalledApplication(name="mysql")]
    assert remove_application_from_installed_list(current, "postgresql") == "mysql"


def test_remove_application_with_multiple():
    current = [
        InstalledApplication(name="mysql"),
        InstalledApplication(name="postgresql"),
        InstalledApplication(name="redis"),
    ]
    assert remove_application_from_installed_list(current, "postgresql,mysql") == "redis"


def test_remove_application_keeps_order():
    current = [
        InstalledApplication(name="a"),
        InstalledApplication(name="b"),
        InstalledApplication(name="c"),
    ]
    assert remove_application_from_installed_list(current, "b") == "a,c"


def test_requested_split_without_plans(marketplace):
    assert requested_split(marketplace, "mysql,redis") == "mysql,redis"


def test_requested_split_with_valid_plan(marketplace):
    assert requested_split(marketplace, "postgresql:10GB") == "postgresql:10GB"


def test_requested_split_picks_default_plan(marketplace, capsys):
    assert requested_split(marketplace, "postgresql:1TB") == "postgresql:5GB"
    assert "picked a default one" in capsys.readouterr().err


def test_requested_split_missing_plan_uses_first(marketplace):
    assert requested_split(marketplace, "postgresql,redis") == "postgresql:5GB,redis"


def test_requested_split_substring_match(marketplace):
    assert requested_split(marketplace, "redi") == "redi"


def test_requested_split_unknown_application(marketplace):
    with pytest.raises(UnknownApplicationError):
        requested_split(marketplace, "mongodb")


def test_requested_split_plan_for_app_without_plans(marketplace):
    with pytest.raises(ValueError):
        requested_split(marketplace, "mysql:big")


def test_remove_node_pool_found():
    pools = [NodePool(id="aaa111"), NodePool(id="bbb222"), NodePool(id="ccc333")]
    remaining, names = remove_node_pool(pools, "aaa", ["existing"])
    assert [p.id for p in remaining] == ["ccc333", "bbb222"]
    assert names == ["existing", "aaa111"]


def test_remove_node_pool_last():
    pools = [NodePool(id="aaa111"), NodePool(id="bbb222")]
    remaining, names = remove_node_pool(pools, "bbb", [])
    assert [p.id for p in remaining] == ["aaa111"]
    assert names == ["bbb222"]


def test_remove_node_pool_not_found_removes_first():
    pools = [NodePool(id="aaa111"), NodePool(id="bbb222"), NodePool(id="ccc333")]
    remaining, names = remove_node_pool(pools, "zzz", [])
    assert [p.id for p in remaining] == ["ccc333", "bbb222"]
    assert names == []


def test_remove_node_pool_empty():
    with pytest.raises(IndexError):
        remove_node_pool([], "aaa", [])


def test_update_node_pool():
    pools = [NodePool(id="aaa111", count=1), NodePool(id="bbb222", count=2)]
    updated = update_node_pool(pools, "bbb", 5)
    assert [p.count for p in updated] == [1, 5]


def test_update_node_pool_no_match():
    pools = [NodePool(id="aaa111", count=1)]
    assert update_node_pool(pools, "zzz", 9) == [NodePool(id="aaa111", count=1)]


@pytest.mark.parametrize(
    "value, expected",
    [("abcdefghij", "abcdef"), ("abcdef", "abcdef"), ("abc", "abc"), ("", "")],
)
def test_trim_id(value, expected):
    assert trim_id(value) == expected


@pytest.mark.parametrize(
    "size, expected",
    [
        ("g3.db.small", "Database"),
        ("g4s.kube.medium", "Kubernetes"),
        ("g3.k3s.large", "Kubernetes"),
        ("g3.kf.xlarge", "KfCluster"),
        ("g3.small", "Instance"),
    ],
)
def test_size_type(size, expected):
    assert size_type(size) == expected


def test_obtain_kube_config_writes_file(home, capsys):
    target = home / "cluster-config"
    obtain_kube_config(str(target), "apiVersion: v1\n", False, False, "MyCluster")
    assert target.read_text() == "apiVersion: v1\n"
    assert (home / ".kube").is_dir()
    out = capsys.readouterr().out
    assert f"KUBECONFIG={target} kubectl get node" in out


def test_obtain_kube_config_kube_path_message(home, capsys):
    kube_dir = home / ".kube"
    kube_dir.mkdir()
    target = kube_dir / "config"
    obtain_kube_config(str(target), "data", False, False, "MyCluster")
    out = capsys.readouterr().out
    assert "kubectl get node" in out
    assert "KUBECONFIG=" not in out
    assert target.read_text() == "data"


def test_obtain_kube_config_merge(home, capsys):
    target = home / "config"
    target.write_text("old")
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"merged")
    with mock.patch("platform.system", return_value="Linux"), mock.patch(
        "civokit.kubernetes.subprocess.run", return_value=completed
    ) as run:
        obtain_kube_config(str(target), "new", True, False, "MyCluster")
    assert target.read_text() == "merged"
    cmd = run.call_args.args[0]
    assert cmd == ["kubectl", "config", "view", "--merge", "--flatten"]
    kubeconfig = run.call_args.kwargs["env"]["KUBECONFIG"]
    assert kubeconfig.endswith(f":{target}")
    out = capsys.readouterr().out
    assert "Merged with main kubernetes config" in out
    assert "kubectl config use-context mycluster" in out


def test_obtain_kube_config_merge_failure(home):
    target = home / "config"
    error = subprocess.CalledProcessError(1, ["kubectl"])
    with mock.patch("platform.system", return_value="Linux"), mock.patch(
        "civokit.kubernetes.subprocess.run", side_effect=error
    ):
        with pytest.raises(RuntimeError, match="could not merge kubeconfigs"):
            obtain_kube_config(str(target), "new", True, False, "MyCluster")


def test_obtain_kube_config_switch_context_failure(home):
    target = home / "config"
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"merged")
    error = subprocess.CalledProcessError(1, ["kubectl"])
    with mock.patch("platform.system", return_value="Linux"), mock.patch(
        "civokit.kubernetes.subprocess.run", side_effect=[completed, error]
    ):
        with pytest.raises(RuntimeError, match="could not change to the context"):
            obtain_kube_config(str(target), "new", True, True, "MyCluster")
    assert target.read_text() == "merged"


def test_obtain_kube_config_switch_context(home, capsys):
    target = home / "config"
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"merged")
    with mock.patch("platform.system", return_value="Linux"), mock.patch(
        "civokit.kubernetes.subprocess.run", return_value=completed
    ) as run:
        obtain_kube_config(str(target), "new", True, True, "MyCluster")
    assert target.read_text() == "merged"
    assert run.call_count == 2
    assert run.call_args.args[0] == ["kubectl", "config", "use-context", "MyCluster"]
    out = capsys.readouterr().out
    assert "kubectl config use-context" not in out
    assert "kubectl get node" in out