"""Benchmark StringBuilder against naive concatenation.

Run with:
    pytest benchmarks/benchmark_vs_concat.py -v --benchmark-only
"""

try:
    import pytest

    from string_builder import StringBuilder

    @pytest.mark.benchmark(group="append-text")
    def test_benchmark_builder_append(benchmark, fragments):
        """Chain append() over every fragment, then to_string()."""

        def build():
            sb = StringBuilder.with_capacity(sum(map(len, fragments)))
            for fragment in fragments:
                sb.append(fragment)
            return sb.to_string()

        benchmark(build)

    @pytest.mark.benchmark(group="append-text")
    def test_benchmark_concat(benchmark, fragments):
        """Repeated += (baseline)."""

        def build():
            out = ""
            for fragment in fragments:
                out += fragment
            return out

        benchmark(build)

    @pytest.mark.benchmark(group="append-bytes")
    def test_benchmark_append_bytes(benchmark, encoded_fragments):
        """append_bytes() per slice."""

        def build():
            sb = StringBuilder()
            for data in encoded_fragments:
                sb.append_bytes(data)
            return sb.to_string()

        benchmark(build)

    @pytest.mark.benchmark(group="append-bytes")
    def test_benchmark_try_append_bytes(benchmark, encoded_fragments):
        """try_append_bytes() per slice, unwrapping each outcome."""

        def build():
            sb = StringBuilder()
            for data in encoded_fragments:
                sb = sb.try_append_bytes(data).unwrap()
            return sb.to_string()

        benchmark(build)

except ImportError:
    pass  # pytest not available
