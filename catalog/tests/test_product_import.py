"""Integration tests for the CSV product importer."""

import pandas as pd
from sqlalchemy.orm import Session

from ..db.repository import record_from_product
from ..db.models import ProductRecord
from ..processors import ErrorTracker, ProcessingStats, ProductImportProcessor
from ..processors import product_import
from .conftest import create_products_csv

def test_validate_data(session_manager):
    processor = ProductImportProcessor(session_manager)

    # Missing required columns
    critical1, warnings1 = processor.validate_data(pd.DataFrame([{'title': 'Only a title'}]))
    assert len(critical1) == 1
    assert 'mainname' in critical1[0]

    # Empty title
    data2 = pd.DataFrame([
        {'title': None, 'mainname': 'A', 'price': 1.0},
        {'title': 'Fine', 'mainname': 'B', 'price': 2.0}
    ])
    critical2, warnings2 = processor.validate_data(data2)
    assert critical2 == []
    assert len(warnings2) == 1

    # Non-numeric price and unknown type
    data3 = pd.DataFrame([
        {'type': 'vinyl', 'title': 'Odd', 'mainname': 'C', 'price': 'cheap'}
    ])
    critical3, warnings3 = processor.validate_data(data3)
    assert critical3 == []
    assert len(warnings3) == 2

def test_import_creates_products(engine, session_manager):
    processor = ProductImportProcessor(session_manager, batch_size=2)
    data = pd.DataFrame([
        {'type': 'book', 'firstname': 'Joseph', 'mainname': 'Heller', 'title': 'Catch 22',
         'price': 11.99, 'numpages': 300, 'playlength': None, 'discount': 10},
        {'type': 'cd', 'firstname': 'The', 'mainname': 'Alabama 3', 'title': 'Exile',
         'price': 10.99, 'numpages': None, 'playlength': 60, 'discount': 0},
        {'type': 'misc', 'firstname': None, 'mainname': 'Bulgakov', 'title': 'Heart of a Dog',
         'price': 5.99, 'numpages': None, 'playlength': None, 'discount': None}
    ])

    stats = processor.process(data)

    assert stats['created'] == 3
    assert stats['total_errors'] == 0
    assert stats['successful_batches'] == 2
    assert stats['total_processed'] == 3
    assert stats['completed_at'] is not None

    with Session(engine) as session:
        records = session.query(ProductRecord).order_by(ProductRecord.id).all()
        assert [r.type for r in records] == ['book', 'cd', 'shop']
        assert records[0].numpages == 300
        assert records[0].discount == 10
        assert records[1].playlength == 60
        assert records[2].firstname == ''
        assert records[2].discount == 0

def test_invalid_rows_are_tracked_and_skipped(engine, session_manager):
    processor = ProductImportProcessor(session_manager)
    data = pd.DataFrame([
        {'type': 'book', 'mainname': 'Nobody', 'title': 'No Pages', 'price': 5, 'numpages': None},
        {'type': 'cd', 'mainname': 'Nobody', 'title': 'Negative', 'price': 5, 'playlength': -1},
        {'type': 'shop', 'mainname': 'Somebody', 'title': 'Valid', 'price': 5},
        {'type': 'shop', 'mainname': 'Somebody', 'title': None, 'price': 5}
    ])

    stats = processor.process(data)

    assert stats['created'] == 1
    assert stats['validation_errors'] == 2
    assert stats['skipped'] == 1
    assert processor.error_tracker.get_summary()['counts'] == {'validation': 2}

    with Session(engine) as session:
        assert [r.title for r in session.query(ProductRecord).all()] == ['Valid']

def test_critical_issues_stop_import(engine, session_manager):
    processor = ProductImportProcessor(session_manager)
    stats = processor.process(pd.DataFrame([{'title': 'No price', 'mainname': 'X'}]))
    assert stats['total_errors'] == 1
    assert stats['successful_batches'] == 0

    with Session(engine) as session:
        assert session.query(ProductRecord).count() == 0

def test_error_limit_stops_processing(session_manager):
    processor = ProductImportProcessor(session_manager, batch_size=1, error_limit=1)
    data = pd.DataFrame([
        {'type': 'book', 'mainname': 'A', 'title': 'Bad', 'price': 1, 'numpages': -3},
        {'type': 'shop', 'mainname': 'B', 'title': 'Never reached', 'price': 1, 'numpages': None}
    ])
    stats = processor.process(data)
    assert stats['created'] == 0
    assert stats['successful_batches'] == 1

def test_failed_batch_counts_no_created_rows(engine, session_manager, monkeypatch):
    def record_or_fail(product):
        if product.get_title() == 'Boom':
            raise RuntimeError("storage refused row")
        return record_from_product(product)

    monkeypatch.setattr(product_import, 'record_from_product', record_or_fail)
    processor = ProductImportProcessor(session_manager, batch_size=2)
    data = pd.DataFrame([
        {'type': 'shop', 'mainname': 'A', 'title': 'Fine', 'price': 1},
        {'type': 'shop', 'mainname': 'B', 'title': 'Boom', 'price': 1}
    ])

    stats = processor.process(data)

    assert stats['created'] == 0
    assert stats['failed_batches'] == 1
    assert stats['total_processed'] == 0
    with Session(engine) as session:
        assert session.query(ProductRecord).count() == 0

def test_error_limit_checked_after_failed_batch(engine, session_manager, monkeypatch):
    def record_or_fail(product):
        if product.get_title() == 'Boom':
            raise RuntimeError("storage refused row")
        return record_from_product(product)

    monkeypatch.setattr(product_import, 'record_from_product', record_or_fail)
    processor = ProductImportProcessor(session_manager, batch_size=1, error_limit=1)
    data = pd.DataFrame([
        {'type': 'shop', 'mainname': 'A', 'title': 'Boom', 'price': 1},
        {'type': 'shop', 'mainname': 'B', 'title': 'Never reached', 'price': 1}
    ])

    stats = processor.process(data)

    assert stats['failed_batches'] == 1
    assert stats['successful_batches'] == 0
    assert stats['total_processed'] == 0
    with Session(engine) as session:
        assert session.query(ProductRecord).count() == 0

def test_fractional_discount_is_a_validation_error(engine, session_manager):
    processor = ProductImportProcessor(session_manager)
    data = pd.DataFrame([
        {'type': 'cd', 'mainname': 'A', 'title': 'Fractional', 'price': 10, 'playlength': 40, 'discount': 12.7},
        {'type': 'cd', 'mainname': 'B', 'title': 'Whole', 'price': 10, 'playlength': 40, 'discount': 12.0}
    ])

    stats = processor.process(data)

    assert stats['validation_errors'] == 1
    assert stats['created'] == 1
    with Session(engine) as session:
        records = session.query(ProductRecord).all()
        assert [(r.title, r.discount) for r in records] == [('Whole', 12)]

def test_process_file(tmp_path, session_manager):
    path = create_products_csv(tmp_path / 'products.csv', [
        {'type': 'book', 'firstname': 'Mikhail', 'mainname': 'Bulgakov', 'title': 'The Master and Margarita',
         'price': '9.50', 'numpages': '480', 'playlength': '', 'discount': '5'},
        {'type': 'shop', 'firstname': '', 'mainname': 'Acme', 'title': 'Bookmark',
         'price': '0.99', 'numpages': '', 'playlength': '', 'discount': ''}
    ])
    processor = ProductImportProcessor(session_manager)

    results = processor.process_file(path)

    assert results['success'] is True
    assert results['summary']['stats']['created'] == 2

def test_process_file_unreadable(tmp_path, session_manager):
    processor = ProductImportProcessor(session_manager)
    results = processor.process_file(tmp_path / 'missing.csv')
    assert results['success'] is False
    assert 'Error reading CSV file' in results['error']

def test_error_tracker_keeps_limited_samples():
    tracker = ErrorTracker(max_samples=2)
    for i in range(5):
        tracker.add_error('validation', f"bad row {i}", {'row': i})
    summary = tracker.get_summary()
    assert summary['counts'] == {'validation': 5}
    assert len(summary['samples']['validation']) == 2
    assert tracker.total == 5

def test_processing_stats_defaults():
    stats = ProcessingStats()
    stats.created += 2
    assert stats['created'] == 2
    assert stats.to_dict()['completed_at'] is None
