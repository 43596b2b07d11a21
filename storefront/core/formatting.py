"""Display helpers shared by templates"""


def format_inr(amount) -> str:
    """Format a rupee amount with Indian digit grouping, e.g. ₹1,23,456"""
    value = int(amount)
    sign = "-" if value < 0 else ""
    digits = str(abs(value))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups + [tail])

    return f"{sign}₹{digits}"
