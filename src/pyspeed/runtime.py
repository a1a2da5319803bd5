# src/pyspeed/runtime.py
"""
Interpreter and device detection for the pyspeed toolkit.
"""

import logging
import platform
from typing import List, Optional

import psutil
import torch

from .config import DeviceInfo, RuntimeInfo
from .enums import Technique, WorkloadKind


logger = logging.getLogger(__name__)

JIT_IMPLEMENTATIONS = ("PyPy",)


class RuntimeManager:
    """Describes the running interpreter and the compute devices it can reach."""

    def __init__(self, implementation: Optional[str] = None):
        self.implementation = implementation or platform.python_implementation()
        self.version = platform.python_version()
        self.devices = self._detect_devices()
        self.primary_device = self._select_primary_device()

    @property
    def is_jit(self) -> bool:
        """Whether the interpreter compiles hot paths at run time."""
        return self.implementation in JIT_IMPLEMENTATIONS

    def _detect_devices(self) -> List[DeviceInfo]:
        """Detect all available devices."""
        devices = []

        # Check CUDA devices
        if torch.cuda.is_available():
            try:
                for i in range(torch.cuda.device_count()):
                    props = torch.cuda.get_device_properties(i)
                    free_mem, _ = torch.cuda.mem_get_info(i)
                    devices.append(DeviceInfo(
                        device_id=i,
                        device_type='cuda',
                        total_memory=props.total_memory,
                        available_memory=free_mem,
                        device_name=props.name
                    ))
            except RuntimeError as exc:
                # Driver present but unusable: fall back to CPU only
                logger.warning(f"CUDA reported available but could not be queried: {exc}")
                devices = []

        # Add CPU
        vm = psutil.virtual_memory()
        devices.append(DeviceInfo(
            device_id=0,
            device_type='cpu',
            total_memory=vm.total,
            available_memory=vm.available,
            device_name=platform.processor() or 'CPU'
        ))

        return devices

    def _select_primary_device(self) -> torch.device:
        """Select the device vectorized work should run on."""
        cuda_devices = [d for d in self.devices if d.device_type == 'cuda']
        if cuda_devices:
            best_device = max(cuda_devices, key=lambda d: d.available_memory)
            return torch.device(f'cuda:{best_device.device_id}')
        return torch.device('cpu')

    def get_total_gpu_memory(self) -> int:
        """Get total GPU memory across all devices."""
        return sum(d.total_memory for d in self.devices if d.device_type == 'cuda')

    def info(self) -> RuntimeInfo:
        """Snapshot of interpreter, CPU and memory information."""
        vm = psutil.virtual_memory()
        return RuntimeInfo(
            implementation=self.implementation,
            version=self.version,
            is_jit=self.is_jit,
            physical_cores=psutil.cpu_count(logical=False) or 1,
            logical_cores=psutil.cpu_count(logical=True) or 1,
            total_memory=vm.total,
            available_memory=vm.available,
            devices=list(self.devices)
        )

    def recommend(self, workload: WorkloadKind) -> List[Technique]:
        """Techniques worth trying first for ``workload``, best first."""
        if workload == WorkloadKind.CPU_BOUND:
            techniques = [Technique.PROFILING, Technique.COMPREHENSION]
            if not self.is_jit:
                techniques.append(Technique.JIT)
            # Processes only help when there are cores to spread over
            if (psutil.cpu_count(logical=True) or 1) > 1:
                techniques.append(Technique.MULTIPROCESSING)
        elif workload == WorkloadKind.IO_BOUND:
            techniques = [Technique.PROFILING, Technique.THREADING]
        elif workload == WorkloadKind.NUMERIC:
            techniques = [Technique.VECTORIZED, Technique.PROFILING]
            if (psutil.cpu_count(logical=True) or 1) > 1:
                techniques.append(Technique.MULTIPROCESSING)
        elif workload == WorkloadKind.MEMORY_BOUND:
            techniques = [Technique.GENERATOR, Technique.SLOTS, Technique.MEMORY_RELEASE]
        else:
            raise ValueError(f"Unknown workload: {workload!r}")

        logger.info(f"→ {workload.value} workload on {self.implementation}: "
                    f"{', '.join(t.value for t in techniques)}")
        return techniques
