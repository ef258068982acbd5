# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/bootcfg/ignition/constants.py

IGNITION_VERSION = "3.0.0"

# 0644
DEFAULT_FILE_MODE = 420

DATA_URL_PREFIX = "data:"

# ---------------------------------------------------------------------
# Well-known paths read by the node at first boot
# ---------------------------------------------------------------------
NODE_ANNOTATIONS_PATH = "/etc/machine-config-daemon/node-annotations.json"
KUBECONFIG_PATH = "/etc/kubernetes/kubeconfig"
PIVOT_IMAGE_PATH = "/etc/pivot/image-pullspec"

PIVOT_RUN_DIR = "/run/pivot"
PIVOT_REBOOT_NEEDED_PATH = "/run/pivot/reboot-needed"
PIVOT_REBOOT_UNIT_NAME = "mcd-write-pivot-reboot.service"

# ---------------------------------------------------------------------
# Node annotations
# ---------------------------------------------------------------------
CURRENT_CONFIG_ANNOTATION = "machineconfiguration.openshift.io/currentConfig"
DESIRED_CONFIG_ANNOTATION = "machineconfiguration.openshift.io/desiredConfig"
DAEMON_STATE_ANNOTATION = "machineconfiguration.openshift.io/state"
DAEMON_STATE_DONE = "Done"
