import asyncio
import random
import time
import statistics
import tracemalloc
from httpx import AsyncClient, ASGITransport
from main import app, init_state

TRIAGE_LEVELS = ["RED", "YELLOW", "GREEN"]
GENDERS = ["F", "M", "X", "O"]


class PerformanceBenchmark:
    def __init__(self):
        self.latencies = []
        self.successful_requests = 0
        self.failed_requests = 0

    async def _timed(self, request):
        start_time = time.perf_counter()

        try:
            response = await request

            latency = (time.perf_counter() - start_time) * 1000
            self.latencies.append(latency)

            if response.status_code < 400:
                self.successful_requests += 1
            else:
                self.failed_requests += 1

        except Exception:
            self.failed_requests += 1
            latency = (time.perf_counter() - start_time) * 1000
            self.latencies.append(latency)

    async def admit(self, client: AsyncClient, age: int, gender: str, triage: str):
        await self._timed(client.post(
            "/v1/patients",
            json={"age": age, "gender": gender, "triage": triage}
        ))

    async def see_next(self, client: AsyncClient):
        await self._timed(client.post("/v1/patients/next/see"))

    def _report_metrics(self, test_name: str, duration: float, num_requests: int):
        throughput = num_requests / duration
        avg_latency = statistics.mean(self.latencies)
        p50 = statistics.median(self.latencies)
        p95 = statistics.quantiles(self.latencies, n=20)[18] if len(self.latencies) >= 20 else max(self.latencies)
        p99 = statistics.quantiles(self.latencies, n=100)[98] if len(self.latencies) >= 100 else max(self.latencies)

        print(f"\n{'=' * 60}")
        print(f"  {test_name}")
        print(f"{'=' * 60}")
        print(f"  Requests:    {num_requests}")
        print(f"  Duration:    {duration:.2f}s")
        print(f"  Throughput:  {throughput:,.0f} req/s")
        print(f"  Succeeded:   {self.successful_requests}")
        print(f"  Rejected:    {self.failed_requests}")
        print(f"  Avg Latency: {avg_latency:.2f}ms")
        print(f"  p50 Latency: {p50:.2f}ms")
        print(f"  p95 Latency: {p95:.2f}ms")
        print(f"  p99 Latency: {p99:.2f}ms")
        print(f"{'=' * 60}")

        return {
            "throughput": throughput,
            "avg_latency": avg_latency,
            "p50": p50,
            "p95": p95,
            "p99": p99,
        }

    def _reset(self):
        self.latencies.clear()
        self.successful_requests = 0
        self.failed_requests = 0

    async def run_admission_test(self, num_patients: int):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            start_time = time.time()
            for _ in range(num_patients):
                await self.admit(
                    client,
                    random.randint(0, 110),
                    random.choice(GENDERS),
                    random.choice(TRIAGE_LEVELS)
                )
            duration = time.time() - start_time

        return self._report_metrics(f"Admission Test ({num_patients} patients)", duration, num_patients)

    async def run_see_test(self, num_patients: int):
        self._reset()

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            start_time = time.time()
            for _ in range(num_patients):
                await self.see_next(client)
            duration = time.time() - start_time

            response = await client.get("/v1/queue/status")
            data = response.json()
            print(f"\n  Unseen Patients: {data.get('size')}")
            print(f"  Seen Patients:   {data.get('seen_count')}")

        return self._report_metrics(f"See Test ({num_patients} patients)", duration, num_patients)

    async def run_overflow_test(self, capacity: int):
        self._reset()

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.delete("/v1/patients")

            start_time = time.time()
            tasks = [self.admit(client, 40, "X", "YELLOW") for _ in range(capacity * 2)]
            await asyncio.gather(*tasks)
            duration = time.time() - start_time

        return self._report_metrics(f"Overflow Test ({capacity * 2} admissions, capacity {capacity})",
                                    duration, capacity * 2)

    async def run_all_benchmarks(self, capacity: int = 5000):
        print("\n" + "#" * 60)
        print("  PRIORITY CARE ADMISSIONS — PERFORMANCE BENCHMARK")
        print("#" * 60)

        init_state(capacity)

        # Memory tracking
        tracemalloc.start()

        results = {}
        results["admit"] = await self.run_admission_test(capacity)
        results["see"] = await self.run_see_test(capacity)
        results["overflow"] = await self.run_overflow_test(capacity)

        mem_after = tracemalloc.get_traced_memory()
        peak_memory = mem_after[1]
        tracemalloc.stop()

        print(f"\n{'=' * 60}")
        print(f"  MEMORY")
        print(f"{'=' * 60}")
        print(f"  Peak Memory Usage: {peak_memory / 1024:.1f} KB ({peak_memory / (1024*1024):.2f} MB)")
        print(f"{'=' * 60}")

        print(f"\n{'#' * 60}")
        print(f"  SUMMARY")
        print(f"{'#' * 60}")
        admit = results["admit"]
        see = results["see"]
        print(f"  Admit p95: {admit['p95']:.2f}ms {'PASS' if admit['p95'] < 5 else 'FAIL'} (target: <5ms)")
        print(f"  See p95:   {see['p95']:.2f}ms {'PASS' if see['p95'] < 5 else 'FAIL'} (target: <5ms)")
        print(f"  Peak Memory: {peak_memory / 1024:.1f} KB")
        print(f"{'#' * 60}\n")

        return results


async def main():
    benchmark = PerformanceBenchmark()
    await benchmark.run_all_benchmarks()


if __name__ == "__main__":
    asyncio.run(main())
