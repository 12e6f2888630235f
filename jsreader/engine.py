from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import anyio
from anyio import to_thread
import httpx
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from .catalogue import scan_content
from .config import Settings
from .http_client import FetchError, build_client, fetch_reference, is_remote
from .report import Reporter


@dataclass
class ScanSummary:
    references: int = 0
    findings: int = 0
    errors: int = 0


async def run_scan(
    references: Sequence[str],
    settings: Settings,
    reporter: Reporter,
    client: Optional[httpx.AsyncClient] = None,
) -> ScanSummary:
    """
    Scan every reference exactly once with ``settings.THREADS`` workers:
      - all references are queued up front, then the queue is closed
      - each worker fetches, matches and pushes findings to one channel
      - a single drain task hands findings to the reporter
      - the channel closes once the last worker exits

    ``client`` is mainly for tests; by default one is built from ``settings``.
    """
    summary = ScanSummary()
    work_send, work_recv = anyio.create_memory_object_stream(max_buffer_size=max(len(references), 1))
    result_send, result_recv = anyio.create_memory_object_stream(max_buffer_size=settings.RESULTS_BUFFER)

    async with work_send:
        for ref in references:
            work_send.send_nowait(ref)

    async def worker(
        jobs: MemoryObjectReceiveStream,
        results: MemoryObjectSendStream,
        http: httpx.AsyncClient,
    ) -> None:
        async with jobs, results:
            async for ref in jobs:
                summary.references += 1
                reporter.status(f"Fetching remote file: {ref}" if is_remote(ref) else f"Reading local file: {ref}")
                try:
                    raw = await fetch_reference(http, ref)
                except FetchError as exc:
                    summary.errors += 1
                    reporter.error(exc.reference, exc.message)
                    continue
                reporter.status(f"Analyzing {ref} ({len(raw)} bytes)")
                content = raw.decode("utf-8", errors="replace")
                # Fresh dedup session per reference, built inside the thread.
                found = await to_thread.run_sync(scan_content, content, ref, settings.DEDUP_SCOPE)
                for f in found:
                    await results.send(f)

    async def drain(results: MemoryObjectReceiveStream) -> None:
        async with results:
            async for f in results:
                summary.findings += 1
                # Console and file writes block; keep them off the event loop.
                await to_thread.run_sync(reporter.finding, f)

    async def fan_out(http: httpx.AsyncClient) -> None:
        async with anyio.create_task_group() as tg:
            tg.start_soon(drain, result_recv)
            async with work_recv, result_send:
                for _ in range(settings.THREADS):
                    tg.start_soon(worker, work_recv.clone(), result_send.clone(), http)

    if client is not None:
        await fan_out(client)
    else:
        async with build_client(settings) as http:
            await fan_out(http)
    return summary

