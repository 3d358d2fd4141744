"""Kubeconfig handling, marketplace application and node pool helpers."""

import os
import subprocess
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path

from civokit.checks import check_os
from civokit.colors import green, yellow_confirm


class UnknownApplicationError(LookupError):
    """Raised when a requested marketplace application does not exist."""


@dataclass
class AppPlan:
    """A plan offered by a marketplace application."""

    label: str
    configuration: dict[str, str] = field(default_factory=dict)


@dataclass
class MarketplaceApplication:
    """An application available in the Kubernetes marketplace."""

    name: str
    version: str = ""
    default: bool = False
    plans: list[AppPlan] = field(default_factory=list)


@dataclass
class InstalledApplication:
    """An application installed on a Kubernetes cluster."""

    name: str
    version: str = ""


@dataclass
class NodePool:
    """A node pool of a Kubernetes cluster."""

    id: str
    size: str = ""
    count: int = 0


def obtain_kube_config(
    kubeconfig_filename: str,
    civo_config: str,
    merge: bool,
    switch_context: bool,
    cluster_name: str,
) -> None:
    """Save a cluster's kubeconfig, optionally merging it with an existing one.

    Raises RuntimeError when kubectl fails to merge or switch context.
    """
    kube_config = civo_config.encode("utf-8")

    if merge:
        kube_config = _merge_configs(
            kubeconfig_filename, kube_config, switch_context, cluster_name
        )

    _write_config(
        kubeconfig_filename, kube_config, False, merge, switch_context, cluster_name
    )

    if merge and switch_context:
        _switch_kubernetes_context(cluster_name)


def _merge_configs(
    local_kubeconfig_path: str,
    k3s_config: bytes,
    switch_context: bool,
    cluster_name: str,
) -> bytes:
    try:
        fd, temp_path = tempfile.mkstemp(prefix="civo-temp-")
    except OSError as exc:
        raise RuntimeError(
            f"could not generate a temporary file to store the kuebeconfig: {exc}"
        ) from exc
    os.close(fd)

    try:
        _write_config(temp_path, k3s_config, True, True, switch_context, cluster_name)

        print(f"Merged with main kubernetes config: {green(local_kubeconfig_path)}")

        env = dict(os.environ)
        if check_os() == "windows":
            env["KUBECONFIG"] = f"{temp_path};{local_kubeconfig_path}"
            cmd = ["powershell", "kubectl", "config", "view", "--merge", "--flatten"]
        else:
            env["KUBECONFIG"] = f"{temp_path}:{local_kubeconfig_path}"
            cmd = ["kubectl", "config", "view", "--merge", "--flatten"]

        try:
            result = subprocess.run(cmd, env=env, capture_output=True, check=True)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise RuntimeError(f"could not merge kubeconfigs: {exc}") from exc
        data = result.stdout
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

    try:
        os.remove(temp_path)
    except OSError as exc:
        raise RuntimeError(
            f"could not remove temporary kubeconfig file: {temp_path}, {exc}"
        ) from exc

    return data


def _write_config(
    path: str,
    data: bytes,
    suppress_message: bool,
    merge_configs: bool,
    switch_config: bool,
    cluster_name: str,
) -> None:
    if not suppress_message:
        print("\nAccess your cluster with:")
        if merge_configs:
            if not switch_config:
                print(f"kubectl config use-context {cluster_name.lower()}")
            print("kubectl get node")
        elif ".kube" in path:
            print("kubectl get node")
        else:
            print(f"KUBECONFIG={path} kubectl get node")

    _check_kube_dir()

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


def _check_kube_dir() -> None:
    kube_dir = Path.home() / ".kube"
    if not kube_dir.exists():
        kube_dir.mkdir(mode=0o755, exist_ok=True)


def _switch_kubernetes_context(context: str) -> None:
    if check_os() == "windows":
        cmd = ["powershell", "kubectl", "config", "use-context", context]
    else:
        cmd = ["kubectl", "config", "use-context", context]

    try:
        subprocess.run(cmd, capture_output=True, check=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        raise RuntimeError(f"could not change to the context: ({context}) {exc}") from exc


def _check_app_plan(app_list: list[MarketplaceApplication], requested: str) -> str:
    app_name, _, plan_name = requested.partition(":")

    found = None
    for app in app_list:
        if app_name in app.name:
            if found is not None:
                print(
                    f"unable to find {app_name} because there were multiple matches",
                    end="",
                )
            found = app

    if found is None:
        message = (
            f"you are trying to install the application {app_name}, "
            "but this application does not exist"
        )
        yellow_confirm("%s\n", message)
        raise UnknownApplicationError(message)

    if found.plans:
        labels = [plan.label for plan in found.plans]
        if plan_name not in labels:
            yellow_confirm(
                "the plan you gave doesn't exist for %s; "
                "we've picked a default one for you\n",
                app_name,
            )
            return f"{app_name}:{found.plans[0].label}"
        return requested

    if plan_name:
        message = (
            f"you are trying to install {app_name} application with a plan "
            "but this application has no plans"
        )
        yellow_confirm("%s\n", message)
        raise ValueError(message)

    return requested


def requested_split(app_list: list[MarketplaceApplication], requested: str) -> str:
    """Validate a comma-separated list of 'app[:plan]' requests.

    Missing or unknown plans are replaced by the application's first plan.
    Raises UnknownApplicationError for an application not in *app_list* and
    ValueError when a plan is given for an application without plans.
    """
    return ",".join(_check_app_plan(app_list, item) for item in requested.split(","))


def remove_application_from_installed_list(
    current: list[InstalledApplication], uninstall: str
) -> str:
    """Return the installed application names left after removing *uninstall*."""
    to_remove = set(uninstall.split(","))
    return ",".join(app.name for app in current if app.name not in to_remove)


def remove_node_pool(
    pools: list[NodePool], pool_id: str, names: list[str]
) -> tuple[list[NodePool], list[str]]:
    """Remove the first pool whose id contains *pool_id*.

    The last pool takes the removed pool's place. When nothing matches, the
    first pool is removed. The matched pool's id is added to the returned
    names. Raises IndexError when *pools* is empty.
    """
    result = list(pools)
    names = list(names)
    key = 0
    for index, pool in enumerate(result):
        if pool_id in pool.id:
            key = index
            names.append(pool.id)
            break

    result[-1], result[key] = result[key], result[-1]
    return result[:-1], names


def update_node_pool(pools: list[NodePool], pool_id: str, count: int) -> list[NodePool]:
    """Set the node count of the first pool whose id contains *pool_id*."""
    result = list(pools)
    for index, pool in enumerate(result):
        if pool_id in pool.id:
            result[index] = replace(pool, count=count)
            break
    return result


def trim_id(value: str) -> str:
    """Shorten an identifier to its first six characters."""
    return value[:6]


def size_type(size: str) -> str:
    """Classify a size name as Database, Kubernetes, KfCluster or Instance."""
    if ".db." in size:
        return "Database"
    if ".k3s." in size or ".kube." in size:
        return "Kubernetes"
    if ".kf." in size:
        return "KfCluster"
    return "Instance"