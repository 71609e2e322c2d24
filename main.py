import argparse
import json
import logging
import sys

from talent_match.config_loader import load_config
from talent_match.engine import MatchEngine, matching_statistics
from talent_match.exceptions import MatchingException, ValidationError
from talent_match.models import Candidate, JobRequirement

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_json(path):
    with open(path, "r") as f:
        return json.load(f)


def _record_id(item, index):
    if isinstance(item, dict):
        for key in ('id', '_id', 'candidateId'):
            if item.get(key) is not None:
                return str(item[key])
    return f"#{index}"


def convert_records(items, from_dict, kind):
    """
    Convert raw JSON records one at a time.

    Returns (records, rejected) where rejected holds (record id, reason)
    for every record that raised ValidationError.
    """
    if not isinstance(items, list):
        raise ValueError(f"Expected a list of {kind} records, got {type(items).__name__}")

    records, rejected = [], []
    for index, item in enumerate(items):
        try:
            records.append(from_dict(item))
        except ValidationError as e:
            record_id = _record_id(item, index)
            logger.warning(f"Skipping malformed {kind} {record_id}: {e}")
            rejected.append((record_id, str(e)))
    return records, rejected


def load_requirements(path):
    """A requirement file holds one requirement object or a list of them."""
    data = load_json(path)
    if isinstance(data, dict):
        data = [data]
    return convert_records(data, JobRequirement.from_dict, "requirement")


def load_candidates(path):
    data = load_json(path)
    if isinstance(data, dict):
        data = data.get("candidates", [])
    return convert_records(data, Candidate.from_dict, "candidate")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Candidate-requisition matching driver")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the engine config (default: config.yaml)')
    parser.add_argument('--requirement', type=str, required=True,
                        help='JSON file with one job requirement or a list of them')
    parser.add_argument('--candidates', type=str, required=True,
                        help='JSON file with the candidate pool')
    parser.add_argument('--min-score', type=int, default=None,
                        help='Override result_policy.min_score')
    parser.add_argument('--max-results', type=int, default=None,
                        help='Override result_policy.max_results')
    parser.add_argument('--stats', action='store_true',
                        help='Include matching statistics per requirement')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.getLogger().setLevel(config.log_level.upper())

    try:
        requirements, rejected_requirements = load_requirements(args.requirement)
        candidates, rejected_candidates = load_candidates(args.candidates)
    except (OSError, ValueError, MatchingException) as e:
        logger.error(f"Failed to load input records: {e}")
        return 1

    logger.info(
        f"Loaded {len(requirements)} requirement(s) and {len(candidates)} candidate(s), "
        f"rejected {len(rejected_requirements)} requirement(s) and {len(rejected_candidates)} candidate(s)"
    )
    engine = MatchEngine(config.engine)

    try:
        summaries = engine.bulk_match(
            requirements, candidates,
            min_score=args.min_score, max_results=args.max_results
        )
    except MatchingException as e:
        logger.error(f"Matching failed: {e}")
        return 1

    load_skipped = [candidate_id for candidate_id, _ in rejected_candidates]
    output = []
    for summary in summaries:
        entry = {
            'requirement_id': summary.requirement_id,
            'title': summary.title,
            'total_matches': summary.total_matches,
            'excellent_matches': summary.excellent_matches,
            'good_matches': summary.good_matches,
            'skipped_candidates': load_skipped + list(summary.skipped_candidates),
            'error': summary.error,
            'matches': [m.to_dict() for m in summary.matches],
        }
        if args.stats:
            entry['statistics'] = matching_statistics(summary.matches)
        output.append(entry)

    for requirement_id, reason in rejected_requirements:
        output.append({
            'requirement_id': requirement_id,
            'title': '',
            'total_matches': 0,
            'excellent_matches': 0,
            'good_matches': 0,
            'skipped_candidates': [],
            'error': reason,
            'matches': [],
        })

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    failed = rejected_requirements or any(s.error is not None for s in summaries)
    return 2 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
