"""Hypothesis strategies for property-based testing of remote-result types."""

from hypothesis import strategies as st

from remote_result import Err, Loading, NotAsked, Ok

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

payloads = st.one_of(integers, texts, booleans, st.none())

# Exception strategies
exceptions = st.sampled_from(
    [
        ValueError('test'),
        TypeError('test'),
        RuntimeError('test'),
    ]
)

# Outcome strategies
oks = st.builds(Ok, payloads)
errs = st.builds(Err, payloads)
int_oks = st.builds(Ok, integers)
int_errs = st.builds(Err, integers)
results = st.one_of(oks, errs)
unsettled = st.sampled_from([Loading(), NotAsked()])
remote_results = st.one_of(oks, errs, unsettled)
int_remote_results = st.one_of(int_oks, int_errs, unsettled)
