# console_scout/report/json_report.py

"""
Генерация JSON-отчёта для ConsoleScout.

Сериализация объекта CheckOutcome в файл.
"""
import json
from pathlib import Path

from console_scout.aggregator import CheckOutcome, report_to_dict


def render_json(outcome: CheckOutcome, output_path: Path | str) -> Path:
    """
    Сохраняет итог проверки outcome в формате JSON по указанному пути.

    :param outcome: объект CheckOutcome с собранными сигналами
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from console_scout.report.json_report import render_json
    report_path = render_json(outcome, 'reports/console.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_to_dict(outcome), f, ensure_ascii=False, indent=2)

    return output
