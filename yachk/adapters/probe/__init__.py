"""Sondes de diagnostic des fichiers media."""

from yachk.adapters.probe.ffmpeg_runner import FFmpegProbeRunner

__all__ = ["FFmpegProbeRunner"]
