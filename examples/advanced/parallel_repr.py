"""Styles are immutable and builders are per-call: render from many threads."""

from concurrent.futures import ThreadPoolExecutor

from reprkit import SHORT_PREFIX_STYLE, to_string


class Job:
    def __init__(self, job_id: int) -> None:
        self.job_id = job_id
        self.tags = [f"t{job_id % 3}"]


def render(job: Job) -> str:
    return to_string(job, style=SHORT_PREFIX_STYLE, id=job.job_id, tags=job.tags)


jobs = [Job(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render, jobs))

print(f"Rendered {len(results)} jobs in parallel")
print("First:", results[0])
print("Last:", results[-1])
