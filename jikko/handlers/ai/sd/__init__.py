"""Stable Diffusion on the GPU host."""

TENSORS_DIR = "/var/lib/tensors"
REMOTE_MODELS_DIR = f"{TENSORS_DIR}/models/checkpoints"
REMOTE_LORAS_DIR = f"{TENSORS_DIR}/models/loras"
REMOTE_OUTPUT_DIR = f"{TENSORS_DIR}/outputs"
