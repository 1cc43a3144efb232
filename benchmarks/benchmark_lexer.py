"""Benchmark the lexer: inline generator vs threaded channel vs stream.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

try:
    import io

    import pytest

    from sclex import Lexer, lex
    from sclex.config import LexConfig, lex_config_context

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_lex_string(benchmark, large_program):
        """Baseline: lex an in-memory string."""

        def run():
            for _ in Lexer(large_program).tokenize():
                pass

        benchmark(run)

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_lex_stream(benchmark, large_program):
        """Lex the same program from a text stream in 4K chunks."""

        def run():
            for _ in Lexer(io.StringIO(large_program)).tokenize():
                pass

        benchmark(run)

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_lex_stream_small_chunks(benchmark, large_program):
        """Stream with 64-character chunks (many read() calls)."""

        def run():
            with lex_config_context(LexConfig(chunk_size=64)):
                lexer = Lexer(io.StringIO(large_program))
            for _ in lexer.tokenize():
                pass

        benchmark(run)

    @pytest.mark.benchmark(group="lex")
    def test_benchmark_lex_errors(benchmark, error_heavy_program):
        """Error tokens cost the same as regular ones."""

        def run():
            for _ in Lexer(error_heavy_program).tokenize():
                pass

        benchmark(run)

    @pytest.mark.benchmark(group="lex-threaded")
    def test_benchmark_lex_threaded(benchmark, large_program):
        """Per-token thread handoff overhead."""

        def run():
            with lex("bench.sc", large_program, threaded=True) as tokens:
                for _ in tokens:
                    pass

        benchmark.pedantic(run, rounds=3, iterations=1)

except ImportError:
    pass  # pytest not available
