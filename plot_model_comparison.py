#!/usr/bin/env python3
"""
Render a static comparison figure (metrics, error types, confusion matrices)
for one dataset and save it as PNG.
"""
import argparse
import logging
import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from classifier_comparison.analysis.projector import (
    CONFUSION_COLUMN_LABELS,
    CONFUSION_ROW_LABELS,
    present_results,
    project_confusion_grid,
    project_error_series,
    project_metrics_table
)
from classifier_comparison.config import (
    DATA_FILE,
    DEFAULT_MODEL_PAIR,
    LOG_FORMAT,
    LOG_LEVEL,
    PERCENT_AXIS_RANGE,
    model_color,
    model_label
)
from classifier_comparison.data.repository import NotFoundError, load_repository

logger = logging.getLogger(__name__)

# Set matplotlib style for reports
plt.style.use('seaborn-v0_8-whitegrid')
plt.rcParams.update({
    'font.size': 11,
    'axes.titlesize': 13,
    'axes.labelsize': 11,
    'legend.fontsize': 10,
    'figure.titlesize': 15,
})


def _grouped_bars(ax, labels, series, ylabel):
    """Draw one bar group per label with one bar per model"""
    x = np.arange(len(labels))
    width = 0.8 / max(len(series), 1)
    for idx, (model, values) in enumerate(series.items()):
        offset = (idx - (len(series) - 1) / 2) * width
        bars = ax.bar(x + offset, values, width, label=model_label(model), color=model_color(model))
        ax.bar_label(bars, fmt='%.2f' if isinstance(values[0], float) else '%d', fontsize=8, padding=2)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=15, ha='right')
    ax.set_ylabel(ylabel)
    ax.legend()


def build_comparison_figure(record, model_keys=DEFAULT_MODEL_PAIR):
    """
    Build the comparison figure for a dataset record.

    Raises:
        ValueError: If none of the requested models has a result for the dataset
    """
    results = present_results(record, model_keys)
    if not results:
        raise ValueError(f"No model results available for {record.name}")
    present = [key for key, _ in results]

    cols = max(2, len(results))
    fig = plt.figure(figsize=(6 * cols, 10))
    grid = fig.add_gridspec(2, cols)
    fig.suptitle(f"Model Comparison - {record.name}")

    # Metric comparison
    ax_metrics = fig.add_subplot(grid[0, 0])
    table = project_metrics_table(record, present)
    _grouped_bars(
        ax_metrics,
        [row["metric"] for row in table],
        {model: [float(row[model]) for row in table] for model in present},
        "Score (%)"
    )
    ax_metrics.set_ylim(*PERCENT_AXIS_RANGE)
    ax_metrics.set_title("Metric Comparison")

    # Error types
    ax_errors = fig.add_subplot(grid[0, 1:])
    error_rows = project_error_series(record, present)
    _grouped_bars(
        ax_errors,
        [row["errorType"] for row in error_rows],
        {model: [row[model] for row in error_rows] for model in present},
        "Count"
    )
    ax_errors.set_title("Error Analysis")

    # Confusion matrices
    for idx, (model, result) in enumerate(results):
        ax = fig.add_subplot(grid[1, idx])
        sns.heatmap(
            np.array(project_confusion_grid(result)),
            annot=True,
            fmt='d',
            cmap='Blues',
            cbar=False,
            xticklabels=CONFUSION_COLUMN_LABELS,
            yticklabels=CONFUSION_ROW_LABELS,
            ax=ax
        )
        ax.set_title(f"{model_label(model)} Confusion Matrix")

    fig.tight_layout()
    return fig


def main():
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Plot a static model comparison for one dataset')
    parser.add_argument('--dataset', type=str, default=None,
                        help='Dataset key to plot (default: first dataset)')
    parser.add_argument('--output-dir', type=str, default='plots',
                        help='Directory to write the PNG to (default: plots)')
    parser.add_argument('--data-file', type=str, default=DATA_FILE,
                        help='JSON file with dataset results (default: built-in datasets)')
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)

    try:
        repository = load_repository(args.data_file)
        dataset_key = args.dataset or repository.list_keys()[0]
        record = repository.get_dataset(dataset_key)
        fig = build_comparison_figure(record)
    except (OSError, ValueError, NotFoundError, IndexError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    os.makedirs(args.output_dir, exist_ok=True)
    output_path = os.path.join(args.output_dir, f"model_comparison_{dataset_key}.png")
    fig.savefig(output_path, dpi=300, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Saved comparison figure to {output_path}")
    print(f"Plot saved to {output_path}")


if __name__ == "__main__":
    main()
