from fluentreq.pytest_plugin.mock import MockTransport


def format_assert_called_error(
    mock: MockTransport,
    *,
    count: int | None = None,
    min_count: int | None = None,
    max_count: int | None = None,
) -> str:
    requests = mock.get_requests()
    actual_count = len(requests)
    error_parts = [f"{mock!r} was not called as expected."]

    if count is not None:
        error_parts.append(f"Expected exactly {count} call(s), but got {actual_count}.")
    else:
        expectations = []
        if min_count is not None:
            expectations.append(f"at least {min_count}")
        if max_count is not None:
            expectations.append(f"at most {max_count}")
        expected_desc = " and ".join(expectations)
        error_parts.append(f"Expected {expected_desc} call(s), but got {actual_count}.")

    if requests:
        error_parts.append(f"\nExecuted requests ({actual_count}):")
        for i, request in enumerate(requests[-5:], 1):
            error_parts.append(f"  {i}. {request!r}")
        if actual_count > 5:
            error_parts.append(f"  ... and {actual_count - 5} more")

    return "\n".join(error_parts)
